from page_table import PROT_NONE, PROT_READ, PROT_WRITE


class SimulationError(Exception):
    pass


class ProtectionError(SimulationError):
    pass


class UnknownPolicyError(SimulationError, ValueError):
    pass


class Frame:
    def __init__(self, frame_num):
        self.frame_num = frame_num
        self.resident = False
        self.dirty = False
        self.in_eviction_queue = False
        self.permissions = PROT_NONE
        self.page = None  # Only meaningful while resident


class FrameRegistry:
    """
    Per-frame metadata for the physical frame pool. The permissions kept here
    are the authoritative copy for write-back decisions. Not safe for
    concurrent mutation.
    """

    def __init__(self, num_frames, stats):
        self.num_frames = num_frames
        self.stats = stats
        self.frames = [Frame(i) for i in range(num_frames)]

    def __getitem__(self, frame_num):
        return self.frames[frame_num]

    def __len__(self):
        return self.num_frames

    def allocate_free(self):
        # free_frames_used counts frames ever handed out, not frames free now
        if self.stats.free_frames_used >= self.num_frames:
            return None
        for frame in self.frames:
            if not frame.resident:
                self.stats.free_frames_used += 1
                return frame.frame_num
        return None

    def mark_resident(self, frame_num, page, permissions):
        frame = self.frames[frame_num]
        frame.resident = True
        frame.page = page
        frame.permissions = permissions

    def mark_dirty(self, frame_num):
        frame = self.frames[frame_num]
        frame.permissions = PROT_READ | PROT_WRITE
        frame.dirty = True

    def is_writable(self, frame_num):
        return self.frames[frame_num].permissions == PROT_READ | PROT_WRITE

    def invalidate(self, frame_num):
        frame = self.frames[frame_num]
        frame.permissions = PROT_NONE
        frame.dirty = False
        frame.resident = False
        frame.page = None

    def resident_pages(self):
        return {frame.page for frame in self.frames if frame.resident}


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.disk_reads = 0
        self.disk_writes = 0
        self.invalidations = 0
        self.free_frames_used = 0

    def as_dict(self):
        return {
            'page_faults': self.page_faults,
            'disk_writes': self.disk_writes,
            'disk_reads': self.disk_reads,
            'invalidations': self.invalidations,
        }

    def __str__(self):
        return (f"Page faults: {self.page_faults}\t"
                f"Disk writes: {self.disk_writes}\t"
                f"Disk reads: {self.disk_reads}\t"
                f"Invalidatings: {self.invalidations}")
