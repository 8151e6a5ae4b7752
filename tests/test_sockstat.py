import pytest

from procparse.sockstat import SockStat, read_sockstat

SOCKSTAT = (
    "sockets: used 231\n"
    "TCP: inuse 27 orphan 1 tw 23 alloc 31 mem 3\n"
    "UDP: inuse 19 mem 17\n"
    "UDPLITE: inuse 0\n"
    "RAW: inuse 0\n"
    "FRAG: inuse 0 memory 0\n"
)


def _write(tmp_path, text):
    target = tmp_path / "sockstat"
    target.write_text(text)
    return target


def test_reads_sockstat(tmp_path):
    assert read_sockstat(_write(tmp_path, SOCKSTAT)) == SockStat(
        sockets_used=231,
        tcp_in_use=27,
        tcp_orphan=1,
        tcp_time_wait=23,
        tcp_allocated=31,
        tcp_memory=3,
        udp_in_use=19,
        udp_memory=17,
        udplite_in_use=0,
        raw_in_use=0,
        frag_in_use=0,
        frag_memory=0,
    )


def test_reads_ipv6_sections(tmp_path):
    text = "TCP6: inuse 4\nUDP6: inuse 5\nRAW6: inuse 6\nFRAG6: inuse 1 memory 2\n"
    stat = read_sockstat(_write(tmp_path, text))
    assert (stat.tcp6_in_use, stat.udp6_in_use, stat.raw6_in_use) == (4, 5, 6)
    assert (stat.frag6_in_use, stat.frag6_memory) == (1, 2)


def test_bad_value_reads_zero_and_dangling_key_is_ignored(tmp_path):
    text = "TCP: inuse x orphan 2 tw\n"
    stat = read_sockstat(_write(tmp_path, text))
    assert stat.tcp_in_use == 0
    assert stat.tcp_orphan == 2
    assert stat.tcp_time_wait == 0


def test_lines_without_colon_are_skipped(tmp_path):
    assert read_sockstat(_write(tmp_path, "garbage\nUDP: inuse 8\n")) == SockStat(udp_in_use=8)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_sockstat(tmp_path / "absent")