import pytest

from procparse.stat import CPUStat, read_stat

PROC_STAT = (
    "cpu  2255 34 2290 22625563 6290 127 456 0 0 0\n"
    "cpu0 1132 34 1441 11311718 3675 127 438 0 0 0\n"
    "cpu1 1123 0 849 11313845 2614 0 18 7 8 9\n"
    "intr 114930548 113199788 3 0 5 263 0 4\n"
    "ctxt 1990473\n"
    "btime 1062191376\n"
    "processes 2915\n"
    "procs_running 1\n"
    "procs_blocked 2\n"
    "softirq 12 3 4\n"
)


def _write(tmp_path, text):
    target = tmp_path / "stat"
    target.write_text(text)
    return target


def test_reads_cpu_totals(tmp_path):
    stat = read_stat(_write(tmp_path, PROC_STAT))
    assert stat.cpu_stat_all == CPUStat("cpu", 2255, 34, 2290, 22625563, 6290, 127, 456, 0, 0, 0)


def test_reads_each_cpu(tmp_path):
    stat = read_stat(_write(tmp_path, PROC_STAT))
    assert stat.cpu_stats == [
        CPUStat("cpu0", 1132, 34, 1441, 11311718, 3675, 127, 438, 0, 0, 0),
        CPUStat("cpu1", 1123, 0, 849, 11313845, 2614, 0, 18, 7, 8, 9),
    ]


def test_reads_system_counters(tmp_path):
    stat = read_stat(_write(tmp_path, PROC_STAT))
    assert stat.interrupts == 114930548
    assert stat.context_switches == 1990473
    assert stat.processes == 2915
    assert stat.procs_running == 1
    assert stat.procs_blocked == 2


def test_boot_time(tmp_path):
    stat = read_stat(_write(tmp_path, PROC_STAT))
    assert stat.boot_time.timestamp() == 1062191376


def test_cpu_line_after_first_line_is_not_the_total(tmp_path):
    stat = read_stat(_write(tmp_path, "ctxt 5\ncpu 1 2 3\n"))
    assert stat.cpu_stat_all == CPUStat()
    assert stat.cpu_stats == [CPUStat("cpu", 1, 2, 3)]


def test_short_and_bad_cpu_fields(tmp_path):
    stat = read_stat(_write(tmp_path, "cpu 5 x 7\n"))
    assert stat.cpu_stat_all == CPUStat("cpu", user=5, nice=0, system=7)


def test_empty_file_gives_defaults(tmp_path):
    stat = read_stat(_write(tmp_path, ""))
    assert stat.cpu_stats == []
    assert stat.boot_time is None
    assert stat.interrupts == 0


def test_counter_without_value_raises(tmp_path):
    with pytest.raises(ValueError):
        read_stat(_write(tmp_path, "ctxt\n"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_stat(tmp_path / "absent")