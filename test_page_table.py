import pytest

from disk import Disk
from page_table import PROT_NONE, PROT_READ, PROT_WRITE, PageFaultError, PageTable


def test_entries_start_unmapped():
    pt = PageTable(4, 2, lambda pt, page: None, page_size=16)
    assert pt.get_entry(3) == (0, PROT_NONE)
    assert len(pt.physmem) == 32
    assert len(pt.virtmem) == 64


def test_out_of_range_entries():
    pt = PageTable(4, 2, lambda pt, page: None, page_size=16)
    with pytest.raises(ValueError):
        pt.get_entry(4)
    with pytest.raises(ValueError):
        pt.set_entry(0, 2, PROT_READ)
    with pytest.raises(ValueError):
        pt.virtmem[64]


def test_access_calls_handler_until_permitted():
    faults = []

    def handler(pt, page):
        faults.append(page)
        frame, bits = pt.get_entry(page)
        if bits == PROT_NONE:
            pt.set_entry(page, 1, PROT_READ)
        else:
            pt.set_entry(page, frame, PROT_READ | PROT_WRITE)

    pt = PageTable(4, 2, handler, page_size=16)
    pt.virtmem[2 * 16 + 3] = 300
    assert faults == [2, 2]
    assert pt.physmem[16 + 3] == 300 & 0xFF
    assert pt.virtmem[2 * 16 + 3] == 300 & 0xFF
    assert faults == [2, 2]


def test_unresolved_fault_raises():
    pt = PageTable(2, 1, lambda pt, page: None, page_size=16)
    with pytest.raises(PageFaultError):
        pt.virtmem[0]


def test_print_table(capsys):
    pt = PageTable(2, 1, lambda pt, page: None, page_size=16)
    pt.set_entry(1, 0, PROT_READ | PROT_WRITE)
    pt.print_table()
    out = capsys.readouterr().out
    assert "page 000000: frame 000000 bits --" in out
    assert "page 000001: frame 000000 bits rw" in out


def test_memory_disk_round_trip():
    disk = Disk(2, block_size=8)
    disk.write_block(1, bytes(range(8)))
    buf = bytearray(8)
    disk.read_block(1, buf)
    assert buf == bytes(range(8))
    disk.read_block(0, buf)
    assert buf == bytes(8)


def test_file_disk(tmp_path):
    path = tmp_path / 'myvirtualdisk'
    with Disk(3, block_size=8, path=str(path)) as disk:
        disk.write_block(2, b'abcdefgh')
        buf = bytearray(8)
        disk.read_block(2, buf)
        assert buf == b'abcdefgh'
    assert path.stat().st_size == 24


def test_disk_rejects_bad_arguments():
    with pytest.raises(ValueError):
        Disk(0)
    disk = Disk(1, block_size=8)
    with pytest.raises(ValueError):
        disk.read_block(1, bytearray(8))
    with pytest.raises(ValueError):
        disk.write_block(0, b'short')
