import sys

from disk import Disk
from memory_manager import FrameRegistry, ProtectionError, SimulationError, Statistics
from page_table import PAGE_SIZE, PROT_NONE, PROT_READ, PROT_WRITE, PageFaultError, PageTable
from programs import PROGRAMS
from replacement import make_policy

FATAL_EXIT = 254
USAGE = "use: virtmem <npages> <nframes> <rand|fifo|custom> <sort|scan|focus>"


class VirtualMemorySimulator:
    """
    Owns one simulation run: disk, page table, frame registry, replacement
    policy and statistics. handle_page_fault is registered as the page
    table's fault handler. Single-threaded; none of the state is safe for
    concurrent mutation.
    """

    def __init__(self, num_pages, num_frames, algorithm='fifo', random_seed=None,
                 page_size=PAGE_SIZE, disk_path=None, debug=False):
        self.algorithm = algorithm
        self.debug = debug
        self.stats = Statistics()
        self.frames = FrameRegistry(num_frames, self.stats)
        self.policy = make_policy(algorithm, self.frames, random_seed=random_seed)
        self.disk = Disk(num_pages, block_size=page_size, path=disk_path)
        try:
            self.page_table = PageTable(num_pages, num_frames, self.handle_page_fault, page_size=page_size)
        except Exception:
            self.disk.close()
            raise

    def flush_page(self, page_table, frame_num):
        frame = self.frames[frame_num]
        if self.frames.is_writable(frame_num):
            self.disk.write_block(frame.page, page_table.frame_slice(frame_num))
            self.stats.disk_writes += 1

        # A clean victim is invalidated too so its old mapping can't be used
        if frame.resident:
            page_table.set_entry(frame.page, frame_num, PROT_NONE)
        self.frames.invalidate(frame_num)
        self.policy.on_evicted(frame_num)
        self.stats.invalidations += 1

    def handle_page_fault(self, page_table, page):
        self.stats.page_faults += 1
        if self.debug:
            if self.stats.page_faults % 100 == 0:
                print(f"Fault num: {self.stats.page_faults}")
            print(f"Page fault at {page}")
            page_table.print_table()

        frame_num, bits = page_table.get_entry(page)

        if bits == PROT_NONE:
            # Read fault: first touch of this page
            new_frame = self.frames.allocate_free()
            if new_frame is None:
                new_frame = self.policy.select_victim()
                if new_frame is None:
                    if self.debug:
                        print("Attempt to pop from empty list")
                    return
                self.flush_page(page_table, new_frame)

            self.disk.read_block(page, page_table.frame_slice(new_frame))
            self.stats.disk_reads += 1
            page_table.set_entry(page, new_frame, PROT_READ)
            self.frames.mark_resident(new_frame, page, PROT_READ)
            self.policy.on_resident(new_frame)
        elif bits == PROT_READ:
            # Write-upgrade fault: same frame, no disk I/O
            page_table.set_entry(page, frame_num, PROT_READ | PROT_WRITE)
            self.frames.mark_dirty(frame_num)
        else:
            raise ProtectionError(f"Wrong protection bits {bits} on page {page}")

    def run_program(self, program):
        if program not in PROGRAMS:
            raise KeyError(program)
        virtmem = self.page_table.virtmem
        return PROGRAMS[program](virtmem, len(virtmem))

    def close(self):
        self.disk.close()


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 4:
        print(USAGE)
        return 1

    try:
        num_pages = int(argv[0])
        num_frames = int(argv[1])
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    algorithm = argv[2]
    program = argv[3]

    try:
        simulator = VirtualMemorySimulator(num_pages, num_frames, algorithm=algorithm,
                                           disk_path='myvirtualdisk')
    except SimulationError as e:
        print(e, file=sys.stderr)
        return FATAL_EXIT
    except (OSError, ValueError) as e:
        print(f"couldn't create virtual disk or page table: {e}", file=sys.stderr)
        return 1

    try:
        if program in PROGRAMS:
            simulator.run_program(program)
        else:
            print(f"unknown program: {program}", file=sys.stderr)
    except (SimulationError, NotImplementedError, PageFaultError) as e:
        print(e, file=sys.stderr)
        return FATAL_EXIT
    finally:
        simulator.close()

    print(simulator.stats)
    return 0


if __name__ == '__main__':
    sys.exit(main())
