import pytest

from procparse.process import Process, read_process
from procparse.process_io import ProcessIO
from procparse.process_stat import ProcessStat
from procparse.process_statm import ProcessStatm
from procparse.process_status import ProcessStatus

STATUS = """Name:\tproftpd
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

STAT = (
    "3323 (proftpd) S 1 3323 3323 0 -1 4202816 1311 57367 0 1 23 58 24 49 20 0 1 0 "
    "2789 16601088 522 4294967295 134512640 135222176 3217552592 3217551836 "
    "4118799382 0 0 272633856 8514799 0 0 0 17 7 0 0 1 0 0\n"
)

STATM = "4053 522 174 174 0 286 0\n"

IO = """rchar: 3865585
wchar: 183294
syscr: 6697
syscw: 997
read_bytes: 90112
write_bytes: 45056
cancelled_write_bytes: 0
"""


@pytest.fixture
def proc_root(tmp_path):
    process_dir = tmp_path / "3323"
    process_dir.mkdir()
    (process_dir / "status").write_text(STATUS)
    (process_dir / "stat").write_text(STAT)
    (process_dir / "statm").write_text(STATM)
    (process_dir / "io").write_text(IO)
    (process_dir / "cmdline").write_bytes(b"proftpd: (accepting connections)\x00\x00\x00")
    return tmp_path


def test_read_process(proc_root):
    expected = Process(
        status=ProcessStatus(
            name="proftpd", state="S (sleeping)", tgid=3323, pid=3323, ppid=1, tracer_pid=0,
            real_uid=0, effective_uid=111, saved_set_uid=0, filesystem_uid=111,
            real_gid=65534, effective_gid=65534, saved_set_gid=65534, filesystem_gid=65534,
            fd_size=32, groups=[2001, 65534], vm_peak=16216, vm_size=16212, vm_lck=0,
            vm_hwm=2092, vm_rss=2088, vm_data=872, vm_stk=272, vm_exe=696, vm_lib=9416,
            vm_pte=36, vm_swap=0, threads=1, sig_q_length=0, sig_q_limit=12091, sig_pnd=0,
            shd_pnd=0, sig_blk=0, sig_ign=272633856, sig_cgt=6450965743, cap_inh=0,
            cap_prm=18446744073709551615, cap_eff=0, cap_bnd=18446744073709551615,
            seccomp=0, cpus_allowed=[255], voluntary_ctxt_switches=5899,
            nonvoluntary_ctxt_switches=26,
        ),
        statm=ProcessStatm(size=4053, resident=522, share=174, text=174, lib=0, data=286, dirty=0),
        stat=ProcessStat(
            pid=3323, comm="(proftpd)", state="S", ppid=1, pgrp=3323, session=3323, tty_nr=0,
            tpgid=-1, flags=4202816, minflt=1311, cminflt=57367, majflt=0, cmajflt=1, utime=23,
            stime=58, cutime=24, cstime=49, priority=20, nice=0, num_threads=1, itrealvalue=0,
            starttime=2789, vsize=16601088, rss=522, rsslim=4294967295, startcode=134512640,
            endcode=135222176, startstack=3217552592, kstkesp=3217551836, kstkeip=4118799382,
            signal=0, blocked=0, sigignore=272633856, sigcatch=8514799, wchan=0, nswap=0,
            cnswap=0, exit_signal=17, processor=7, rt_priority=0, policy=0,
            delayacct_blkio_ticks=1, guest_time=0, cguest_time=0,
        ),
        io=ProcessIO(
            rchar=3865585, wchar=183294, syscr=6697, syscw=997, read_bytes=90112,
            write_bytes=45056, cancelled_write_bytes=0,
        ),
        cmdline="proftpd: (accepting connections)",
    )
    assert read_process(3323, proc_root) == expected


def test_missing_process_raises(proc_root):
    with pytest.raises(FileNotFoundError):
        read_process(1, proc_root)


def test_missing_component_file_raises(proc_root):
    (proc_root / "3323" / "io").unlink()
    with pytest.raises(FileNotFoundError):
        read_process(3323, str(proc_root))