"""Reader for ``/proc/net/netstat``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from procparse.net_ip import _parse_uint


def _counter(name: str):
    """A counter field filled from the kernel column called ``name``."""
    return field(default=0, metadata={"key": name})


@dataclass
class NetStat:
    """Extended TCP (``TcpExt``) and IP (``IpExt``) counters."""

    # TcpExt
    syncookies_sent: int = _counter("SyncookiesSent")
    syncookies_recv: int = _counter("SyncookiesRecv")
    syncookies_failed: int = _counter("SyncookiesFailed")
    embryonic_rsts: int = _counter("EmbryonicRsts")
    prune_called: int = _counter("PruneCalled")
    rcv_pruned: int = _counter("RcvPruned")
    ofo_pruned: int = _counter("OfoPruned")
    out_of_window_icmps: int = _counter("OutOfWindowIcmps")
    lock_dropped_icmps: int = _counter("LockDroppedIcmps")
    arp_filter: int = _counter("ArpFilter")
    tw: int = _counter("TW")
    tw_recycled: int = _counter("TWRecycled")
    tw_killed: int = _counter("TWKilled")
    paws_passive: int = _counter("PAWSPassive")
    paws_active: int = _counter("PAWSActive")
    paws_estab: int = _counter("PAWSEstab")
    delayed_acks: int = _counter("DelayedACKs")
    delayed_ack_locked: int = _counter("DelayedACKLocked")
    delayed_ack_lost: int = _counter("DelayedACKLost")
    listen_overflows: int = _counter("ListenOverflows")
    listen_drops: int = _counter("ListenDrops")
    tcp_prequeued: int = _counter("TCPPrequeued")
    tcp_direct_copy_from_backlog: int = _counter("TCPDirectCopyFromBacklog")
    tcp_direct_copy_from_prequeue: int = _counter("TCPDirectCopyFromPrequeue")
    tcp_prequeue_dropped: int = _counter("TCPPrequeueDropped")
    tcp_hp_hits: int = _counter("TCPHPHits")
    tcp_hp_hits_to_user: int = _counter("TCPHPHitsToUser")
    tcp_pure_acks: int = _counter("TCPPureAcks")
    tcp_hp_acks: int = _counter("TCPHPAcks")
    tcp_reno_recovery: int = _counter("TCPRenoRecovery")
    tcp_sack_recovery: int = _counter("TCPSackRecovery")
    tcp_sack_reneging: int = _counter("TCPSACKReneging")
    tcp_fack_reorder: int = _counter("TCPFACKReorder")
    tcp_sack_reorder: int = _counter("TCPSACKReorder")
    tcp_reno_reorder: int = _counter("TCPRenoReorder")
    tcp_ts_reorder: int = _counter("TCPTSReorder")
    tcp_full_undo: int = _counter("TCPFullUndo")
    tcp_partial_undo: int = _counter("TCPPartialUndo")
    tcp_dsack_undo: int = _counter("TCPDSACKUndo")
    tcp_loss_undo: int = _counter("TCPLossUndo")
    tcp_loss: int = _counter("TCPLoss")
    tcp_lost_retransmit: int = _counter("TCPLostRetransmit")
    tcp_reno_failures: int = _counter("TCPRenoFailures")
    tcp_sack_failures: int = _counter("TCPSackFailures")
    tcp_loss_failures: int = _counter("TCPLossFailures")
    tcp_fast_retrans: int = _counter("TCPFastRetrans")
    tcp_forward_retrans: int = _counter("TCPForwardRetrans")
    tcp_slow_start_retrans: int = _counter("TCPSlowStartRetrans")
    tcp_timeouts: int = _counter("TCPTimeouts")
    tcp_loss_probes: int = _counter("TCPLossProbes")
    tcp_loss_probe_recovery: int = _counter("TCPLossProbeRecovery")
    tcp_reno_recovery_fail: int = _counter("TCPRenoRecoveryFail")
    tcp_sack_recovery_fail: int = _counter("TCPSackRecoveryFail")
    tcp_scheduler_failed: int = _counter("TCPSchedulerFailed")
    tcp_rcv_collapsed: int = _counter("TCPRcvCollapsed")
    tcp_dsack_old_sent: int = _counter("TCPDSACKOldSent")
    tcp_dsack_ofo_sent: int = _counter("TCPDSACKOfoSent")
    tcp_dsack_recv: int = _counter("TCPDSACKRecv")
    tcp_dsack_ofo_recv: int = _counter("TCPDSACKOfoRecv")
    tcp_abort_on_syn: int = _counter("TCPAbortOnSyn")
    tcp_abort_on_data: int = _counter("TCPAbortOnData")
    tcp_abort_on_close: int = _counter("TCPAbortOnClose")
    tcp_abort_on_memory: int = _counter("TCPAbortOnMemory")
    tcp_abort_on_timeout: int = _counter("TCPAbortOnTimeout")
    tcp_abort_on_linger: int = _counter("TCPAbortOnLinger")
    tcp_abort_failed: int = _counter("TCPAbortFailed")
    tcp_memory_pressures: int = _counter("TCPMemoryPressures")
    tcp_sack_discard: int = _counter("TCPSACKDiscard")
    tcp_dsack_ignored_old: int = _counter("TCPDSACKIgnoredOld")
    tcp_dsack_ignored_no_undo: int = _counter("TCPDSACKIgnoredNoUndo")
    tcp_spurious_rtos: int = _counter("TCPSpuriousRTOs")
    tcp_md5_not_found: int = _counter("TCPMD5NotFound")
    tcp_md5_unexpected: int = _counter("TCPMD5Unexpected")
    tcp_sack_shifted: int = _counter("TCPSackShifted")
    tcp_sack_merged: int = _counter("TCPSackMerged")
    tcp_sack_shift_fallback: int = _counter("TCPSackShiftFallback")
    tcp_backlog_drop: int = _counter("TCPBacklogDrop")
    tcp_min_ttl_drop: int = _counter("TCPMinTTLDrop")
    tcp_defer_accept_drop: int = _counter("TCPDeferAcceptDrop")
    ip_reverse_path_filter: int = _counter("IPReversePathFilter")
    tcp_time_wait_overflow: int = _counter("TCPTimeWaitOverflow")
    tcp_req_q_full_do_cookies: int = _counter("TCPReqQFullDoCookies")
    tcp_req_q_full_drop: int = _counter("TCPReqQFullDrop")
    tcp_retrans_fail: int = _counter("TCPRetransFail")
    tcp_rcv_coalesce: int = _counter("TCPRcvCoalesce")
    tcp_ofo_queue: int = _counter("TCPOFOQueue")
    tcp_ofo_drop: int = _counter("TCPOFODrop")
    tcp_ofo_merge: int = _counter("TCPOFOMerge")
    tcp_challenge_ack: int = _counter("TCPChallengeACK")
    tcp_syn_challenge: int = _counter("TCPSYNChallenge")
    tcp_fast_open_active: int = _counter("TCPFastOpenActive")
    tcp_fast_open_active_fail: int = _counter("TCPFastOpenActiveFail")
    tcp_fast_open_passive: int = _counter("TCPFastOpenPassive")
    tcp_fast_open_passive_fail: int = _counter("TCPFastOpenPassiveFail")
    tcp_fast_open_listen_overflow: int = _counter("TCPFastOpenListenOverflow")
    tcp_fast_open_cookie_reqd: int = _counter("TCPFastOpenCookieReqd")
    tcp_spurious_rtx_host_queues: int = _counter("TCPSpuriousRtxHostQueues")
    busy_poll_rx_packets: int = _counter("BusyPollRxPackets")
    tcp_auto_corking: int = _counter("TCPAutoCorking")
    tcp_from_zero_window_adv: int = _counter("TCPFromZeroWindowAdv")
    tcp_to_zero_window_adv: int = _counter("TCPToZeroWindowAdv")
    tcp_want_zero_window_adv: int = _counter("TCPWantZeroWindowAdv")
    tcp_syn_retrans: int = _counter("TCPSynRetrans")
    tcp_orig_data_sent: int = _counter("TCPOrigDataSent")
    # IpExt
    in_no_routes: int = _counter("InNoRoutes")
    in_truncated_pkts: int = _counter("InTruncatedPkts")
    in_mcast_pkts: int = _counter("InMcastPkts")
    out_mcast_pkts: int = _counter("OutMcastPkts")
    in_bcast_pkts: int = _counter("InBcastPkts")
    out_bcast_pkts: int = _counter("OutBcastPkts")
    in_octets: int = _counter("InOctets")
    out_octets: int = _counter("OutOctets")
    in_mcast_octets: int = _counter("InMcastOctets")
    out_mcast_octets: int = _counter("OutMcastOctets")
    in_bcast_octets: int = _counter("InBcastOctets")
    out_bcast_octets: int = _counter("OutBcastOctets")
    in_csum_errors: int = _counter("InCsumErrors")
    in_no_ect_pkts: int = _counter("InNoECTPkts")
    in_ect1_pkts: int = _counter("InECT1Pkts")
    in_ect0_pkts: int = _counter("InECT0Pkts")
    in_ce_pkts: int = _counter("InCEPkts")


_ATTRIBUTES = {f.metadata["key"]: f.name for f in fields(NetStat)}


def _after_colon(line: str) -> list[str]:
    return line[line.find(":") + 1 :].split()


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def read_netstat(path: str | os.PathLike) -> NetStat:
    """Parse header/value line pairs; unknown counters are ignored and bad numbers read as 0."""
    lines = Path(path).read_text(encoding="utf-8", errors="surrogateescape").split("\n")
    raw: dict[str, str] = {}
    for header_line, value_line in zip(lines[0::2], lines[1::2]):
        headers = _after_colon(header_line)
        values = _after_colon(value_line)
        if len(values) < len(headers):
            raise ValueError(f"Cannot parse netstat values: {value_line!r}")
        raw.update(zip(headers, values))
    return NetStat(
        **{
            attribute: _uint_or_zero(raw[key])
            for key, attribute in _ATTRIBUTES.items()
            if key in raw
        }
    )