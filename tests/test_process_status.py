import pytest

from procparse.process_status import ProcessStatus, read_process_status

STATUS_3323 = """Name:\tproftpd
State:\tS (sleeping)
Tgid:\t3323
Pid:\t3323
PPid:\t1
TracerPid:\t0
Uid:\t0\t111\t0\t111
Gid:\t65534\t65534\t65534\t65534
FDSize:\t32
Groups:\t2001 65534 
VmPeak:\t   16216 kB
VmSize:\t   16212 kB
VmLck:\t       0 kB
VmHWM:\t    2092 kB
VmRSS:\t    2088 kB
VmData:\t     872 kB
VmStk:\t     272 kB
VmExe:\t     696 kB
VmLib:\t    9416 kB
VmPTE:\t      36 kB
VmSwap:\t       0 kB
Threads:\t1
SigQ:\t0/12091
SigPnd:\t0000000000000000
ShdPnd:\t0000000000000000
SigBlk:\t0000000000000000
SigIgn:\t0000000010401000
SigCgt:\t000000018081ecef
CapInh:\t0000000000000000
CapPrm:\tffffffffffffffff
CapEff:\t0000000000000000
CapBnd:\tffffffffffffffff
Seccomp:\t0
Cpus_allowed:\tff
Cpus_allowed_list:\t0-7
voluntary_ctxt_switches:\t5899
nonvoluntary_ctxt_switches:\t26
"""


def _write(tmp_path, text):
    target = tmp_path / "status"
    target.write_text(text)
    return target


def test_read_process_status(tmp_path):
    status = read_process_status(_write(tmp_path, STATUS_3323))
    expected = ProcessStatus(
        name="proftpd",
        state="S (sleeping)",
        tgid=3323,
        pid=3323,
        ppid=1,
        tracer_pid=0,
        real_uid=0,
        effective_uid=111,
        saved_set_uid=0,
        filesystem_uid=111,
        real_gid=65534,
        effective_gid=65534,
        saved_set_gid=65534,
        filesystem_gid=65534,
        fd_size=32,
        groups=[2001, 65534],
        vm_peak=16216,
        vm_size=16212,
        vm_lck=0,
        vm_hwm=2092,
        vm_rss=2088,
        vm_data=872,
        vm_stk=272,
        vm_exe=696,
        vm_lib=9416,
        vm_pte=36,
        vm_swap=0,
        threads=1,
        sig_q_length=0,
        sig_q_limit=12091,
        sig_pnd=0,
        shd_pnd=0,
        sig_blk=0,
        sig_ign=272633856,
        sig_cgt=6450965743,
        cap_inh=0,
        cap_prm=18446744073709551615,
        cap_eff=0,
        cap_bnd=18446744073709551615,
        seccomp=0,
        cpus_allowed=[255],
        voluntary_ctxt_switches=5899,
        nonvoluntary_ctxt_switches=26,
    )
    assert status == expected


def test_mems_allowed_split_on_commas(tmp_path):
    status = read_process_status(_write(tmp_path, "Mems_allowed:\t00000000,00000001\n"))
    assert status.mems_allowed == [0, 1]


def test_incomplete_uid_line_is_ignored(tmp_path):
    status = read_process_status(_write(tmp_path, "Uid:\t1 2 3\nPid:\t7\n"))
    assert (status.real_uid, status.pid) == (0, 7)


def test_negative_ppid(tmp_path):
    assert read_process_status(_write(tmp_path, "PPid:\t-1\n")).ppid == -1


def test_invalid_number_raises(tmp_path):
    with pytest.raises(ValueError):
        read_process_status(_write(tmp_path, "Tgid:\tabc\n"))


def test_missing_memory_value_raises(tmp_path):
    with pytest.raises(ValueError):
        read_process_status(_write(tmp_path, "VmPeak:\n"))


def test_seccomp_out_of_range_raises(tmp_path):
    with pytest.raises(ValueError):
        read_process_status(_write(tmp_path, "Seccomp:\t256\n"))