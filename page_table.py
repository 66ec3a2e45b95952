PAGE_SIZE = 4096

PROT_NONE = 0
PROT_READ = 1
PROT_WRITE = 2


class PageFaultError(Exception):
    pass


class PageTable:
    """
    Software translation layer: maps virtual page numbers to
    (frame, protection bits) and owns the physical frame buffer.
    Accesses through `virtmem` that lack permission invoke the fault
    handler as handler(page_table, page). Not safe for concurrent use.
    """

    def __init__(self, num_pages, num_frames, handler, page_size=PAGE_SIZE):
        if num_pages <= 0 or num_frames <= 0:
            raise ValueError(f"Need at least one page and one frame, got {num_pages} pages, {num_frames} frames")
        self.num_pages = num_pages
        self.num_frames = num_frames
        self.page_size = page_size
        self.handler = handler
        # Each entry is [frame, bits]; frame is meaningless while bits == PROT_NONE
        self.entries = [[0, PROT_NONE] for _ in range(num_pages)]
        self.physmem = bytearray(num_frames * page_size)
        self.virtmem = VirtualMemory(self)

    def _check_page(self, page):
        if page < 0 or page >= self.num_pages:
            raise ValueError(f"Page number {page} out of range (0 .. {self.num_pages - 1})")

    def _check_frame(self, frame):
        if frame < 0 or frame >= self.num_frames:
            raise ValueError(f"Frame number {frame} out of range (0 .. {self.num_frames - 1})")

    def get_entry(self, page):
        self._check_page(page)
        frame, bits = self.entries[page]
        return frame, bits

    def set_entry(self, page, frame, bits):
        self._check_page(page)
        self._check_frame(frame)
        self.entries[page] = [frame, bits]

    def frame_slice(self, frame):
        self._check_frame(frame)
        start = frame * self.page_size
        return memoryview(self.physmem)[start:start + self.page_size]

    def translate(self, address, bits_needed):
        page, offset = divmod(address, self.page_size)
        self._check_page(page)
        while True:
            frame, bits = self.entries[page]
            if bits & bits_needed == bits_needed:
                return frame * self.page_size + offset
            self.handler(self, page)
            if self.entries[page] == [frame, bits]:
                raise PageFaultError(f"Fault on page {page} was not resolved by the handler")

    def print_table(self):
        for page, (frame, bits) in enumerate(self.entries):
            r = 'r' if bits & PROT_READ else '-'
            w = 'w' if bits & PROT_WRITE else '-'
            print(f"page {page:06d}: frame {frame:06d} bits {r}{w}")


class VirtualMemory:
    # Byte-addressed view of the virtual address space
    def __init__(self, page_table):
        self.page_table = page_table

    def __len__(self):
        return self.page_table.num_pages * self.page_table.page_size

    def __getitem__(self, address):
        return self.page_table.physmem[self.page_table.translate(address, PROT_READ)]

    def __setitem__(self, address, value):
        bits_needed = PROT_READ | PROT_WRITE
        self.page_table.physmem[self.page_table.translate(address, bits_needed)] = value & 0xFF
