"""Reader for ``/proc/net/snmp``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from procparse.net_ip import _parse_uint


def _counter(key: str):
    """A counter filled from ``<protocol><column>`` in the file."""
    return field(default=0, metadata={"key": key})


@dataclass
class Snmp:
    """SNMP counters for IP, ICMP, TCP, UDP and UDP-Lite."""

    # Ip
    ip_forwarding: int = _counter("IpForwarding")
    ip_default_ttl: int = _counter("IpDefaultTTL")
    ip_in_receives: int = _counter("IpInReceives")
    ip_in_hdr_errors: int = _counter("IpInHdrErrors")
    ip_in_addr_errors: int = _counter("IpInAddrErrors")
    ip_forw_datagrams: int = _counter("IpForwDatagrams")
    ip_in_unknown_protos: int = _counter("IpInUnknownProtos")
    ip_in_discards: int = _counter("IpInDiscards")
    ip_in_delivers: int = _counter("IpInDelivers")
    ip_out_requests: int = _counter("IpOutRequests")
    ip_out_discards: int = _counter("IpOutDiscards")
    ip_out_no_routes: int = _counter("IpOutNoRoutes")
    ip_reasm_timeout: int = _counter("IpReasmTimeout")
    ip_reasm_reqds: int = _counter("IpReasmReqds")
    ip_reasm_oks: int = _counter("IpReasmOKs")
    ip_reasm_fails: int = _counter("IpReasmFails")
    ip_frag_oks: int = _counter("IpFragOKs")
    ip_frag_fails: int = _counter("IpFragFails")
    ip_frag_creates: int = _counter("IpFragCreates")
    # Icmp
    icmp_in_msgs: int = _counter("IcmpInMsgs")
    icmp_in_errors: int = _counter("IcmpInErrors")
    icmp_in_csum_errors: int = _counter("IcmpInCsumErrors")
    icmp_in_dest_unreachs: int = _counter("IcmpInDestUnreachs")
    icmp_in_time_excds: int = _counter("IcmpInTimeExcds")
    icmp_in_parm_probs: int = _counter("IcmpInParmProbs")
    icmp_in_src_quenchs: int = _counter("IcmpInSrcQuenchs")
    icmp_in_redirects: int = _counter("IcmpInRedirects")
    icmp_in_echos: int = _counter("IcmpInEchos")
    icmp_in_echo_reps: int = _counter("IcmpInEchoReps")
    icmp_in_timestamps: int = _counter("IcmpInTimestamps")
    icmp_in_timestamp_reps: int = _counter("IcmpInTimestampReps")
    icmp_in_addr_masks: int = _counter("IcmpInAddrMasks")
    icmp_in_addr_mask_reps: int = _counter("IcmpInAddrMaskReps")
    icmp_out_msgs: int = _counter("IcmpOutMsgs")
    icmp_out_errors: int = _counter("IcmpOutErrors")
    icmp_out_dest_unreachs: int = _counter("IcmpOutDestUnreachs")
    icmp_out_time_excds: int = _counter("IcmpOutTimeExcds")
    icmp_out_parm_probs: int = _counter("IcmpOutParmProbs")
    icmp_out_src_quenchs: int = _counter("IcmpOutSrcQuenchs")
    icmp_out_redirects: int = _counter("IcmpOutRedirects")
    icmp_out_echos: int = _counter("IcmpOutEchos")
    icmp_out_echo_reps: int = _counter("IcmpOutEchoReps")
    icmp_out_timestamps: int = _counter("IcmpOutTimestamps")
    icmp_out_timestamp_reps: int = _counter("IcmpOutTimestampReps")
    icmp_out_addr_masks: int = _counter("IcmpOutAddrMasks")
    icmp_out_addr_mask_reps: int = _counter("IcmpOutAddrMaskReps")
    # IcmpMsg
    icmpmsg_in_type0: int = _counter("IcmpMsgInType0")
    icmpmsg_in_type3: int = _counter("IcmpMsgInType3")
    icmpmsg_in_type5: int = _counter("IcmpMsgInType5")
    icmpmsg_in_type8: int = _counter("IcmpMsgInType8")
    icmpmsg_in_type11: int = _counter("IcmpMsgInType11")
    icmpmsg_in_type13: int = _counter("IcmpMsgInType13")
    icmpmsg_out_type0: int = _counter("IcmpMsgOutType0")
    icmpmsg_out_type3: int = _counter("IcmpMsgOutType3")
    icmpmsg_out_type8: int = _counter("IcmpMsgOutType8")
    icmpmsg_out_type14: int = _counter("IcmpMsgOutType14")
    icmpmsg_out_type69: int = _counter("IcmpMsgOutType69")
    # Tcp
    tcp_rto_algorithm: int = _counter("TcpRtoAlgorithm")
    tcp_rto_min: int = _counter("TcpRtoMin")
    tcp_rto_max: int = _counter("TcpRtoMax")
    tcp_max_conn: int = _counter("TcpMaxConn")
    tcp_active_opens: int = _counter("TcpActiveOpens")
    tcp_passive_opens: int = _counter("TcpPassiveOpens")
    tcp_attempt_fails: int = _counter("TcpAttemptFails")
    tcp_estab_resets: int = _counter("TcpEstabResets")
    tcp_curr_estab: int = _counter("TcpCurrEstab")
    tcp_in_segs: int = _counter("TcpInSegs")
    tcp_out_segs: int = _counter("TcpOutSegs")
    tcp_retrans_segs: int = _counter("TcpRetransSegs")
    tcp_in_errs: int = _counter("TcpInErrs")
    tcp_out_rsts: int = _counter("TcpOutRsts")
    tcp_in_csum_errors: int = _counter("TcpInCsumErrors")
    # Udp
    udp_in_datagrams: int = _counter("UdpInDatagrams")
    udp_no_ports: int = _counter("UdpNoPorts")
    udp_in_errors: int = _counter("UdpInErrors")
    udp_out_datagrams: int = _counter("UdpOutDatagrams")
    udp_rcvbuf_errors: int = _counter("UdpRcvbufErrors")
    udp_sndbuf_errors: int = _counter("UdpSndbufErrors")
    udp_in_csum_errors: int = _counter("UdpInCsumErrors")
    # UdpLite
    udp_lite_in_datagrams: int = _counter("UdpLiteInDatagrams")
    udp_lite_no_ports: int = _counter("UdpLiteNoPorts")
    udp_lite_in_errors: int = _counter("UdpLiteInErrors")
    udp_lite_out_datagrams: int = _counter("UdpLiteOutDatagrams")
    udp_lite_rcvbuf_errors: int = _counter("UdpLiteRcvbufErrors")
    udp_lite_sndbuf_errors: int = _counter("UdpLiteSndbufErrors")
    udp_lite_in_csum_errors: int = _counter("UdpLiteInCsumErrors")


_ATTRIBUTES = {f.metadata["key"]: f.name for f in fields(Snmp)}


def _after_colon(line: str) -> list[str]:
    return line[line.find(":") + 1 :].split()


def _uint_or_zero(text: str) -> int:
    try:
        return _parse_uint(text)
    except ValueError:
        return 0


def read_snmp(path: str | os.PathLike) -> Snmp:
    """Parse header/value line pairs.

    Unknown counters are ignored; counters without a value, or whose value is
    not an unsigned integer (such as ``MaxConn -1``), read as 0.
    """
    lines = Path(path).read_text(encoding="utf-8", errors="surrogateescape").split("\n")
    raw: dict[str, str | None] = {}
    for header_line, value_line in zip(lines[0::2], lines[1::2]):
        header_words = header_line.split()
        if not header_words:
            raise ValueError(f"Cannot parse snmp header: {header_line!r}")
        protocol = header_words[0].replace(":", "")
        headers = _after_colon(header_line)
        values = _after_colon(value_line)
        for position, header in enumerate(headers):
            raw[protocol + header] = values[position] if position < len(values) else None
    return Snmp(
        **{
            attribute: _uint_or_zero(raw[key]) if raw[key] is not None else 0
            for key, attribute in _ATTRIBUTES.items()
            if key in raw
        }
    )