import random
import time
from collections import deque

from memory_manager import UnknownPolicyError


class ReplacementPolicy:
    name = None

    def __init__(self, frames, random_seed=None):
        self.frames = frames

    def select_victim(self):
        raise NotImplementedError

    def on_resident(self, frame_num):
        pass

    def on_evicted(self, frame_num):
        pass


class RandomPolicy(ReplacementPolicy):
    name = 'rand'

    def __init__(self, frames, random_seed=None):
        super().__init__(frames)
        if random_seed is None:
            random_seed = int(time.time())
        self.random_seed = random_seed
        self.rng = random.Random(random_seed)

    def select_victim(self):
        # May pick a frame that is not resident; flushing it is harmless
        return self.rng.randrange(len(self.frames))


class FIFOPolicy(ReplacementPolicy):
    name = 'fifo'

    def __init__(self, frames, random_seed=None):
        super().__init__(frames)
        self.queue = deque()  # front is the oldest resident frame

    def on_resident(self, frame_num):
        frame = self.frames[frame_num]
        if frame.in_eviction_queue:
            return
        self.queue.append(frame_num)
        frame.in_eviction_queue = True

    def select_victim(self):
        if not self.queue:
            return None
        frame_num = self.queue.popleft()
        self.frames[frame_num].in_eviction_queue = False
        return frame_num

    def on_evicted(self, frame_num):
        frame = self.frames[frame_num]
        if frame.in_eviction_queue:
            self.queue.remove(frame_num)
            frame.in_eviction_queue = False

    def __len__(self):
        return len(self.queue)


class CustomPolicy(ReplacementPolicy):
    name = 'custom'

    def select_victim(self):
        raise NotImplementedError("Custom replacement policy is not implemented")


POLICIES = {
    'rand': RandomPolicy,
    'fifo': FIFOPolicy,
    'custom': CustomPolicy,
}


def make_policy(name, frames, random_seed=None):
    if name not in POLICIES:
        raise UnknownPolicyError(f"Unknown replacement policy: {name!r} (expected rand|fifo|custom)")
    return POLICIES[name](frames, random_seed=random_seed)
