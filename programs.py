import random


def scan_program(data, length):
    total = 0
    for i in range(length):
        data[i] = i % 256
    for _ in range(10):
        for i in range(length):
            total += data[i]
    print(f"scan result is {total}")
    return total


def _sift_down(data, start, end):
    root = start
    while 2 * root + 1 <= end:
        child = 2 * root + 1
        if child + 1 <= end and data[child] < data[child + 1]:
            child += 1
        if data[root] < data[child]:
            data[root], data[child] = data[child], data[root]
            root = child
        else:
            return


def sort_program(data, length):
    """
    Fill the region with seeded random bytes and heapsort it in place, so
    every comparison and swap goes through the virtual memory view.
    """
    rng = random.Random(4856)
    total = 0
    for i in range(length):
        data[i] = rng.randrange(256)

    for start in range(length // 2 - 1, -1, -1):
        _sift_down(data, start, length - 1)
    for end in range(length - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, 0, end - 1)

    for i in range(length):
        total += data[i]
    print(f"sort result is {total}")
    return total


def focus_program(data, length):
    rng = random.Random(38290)
    total = 0
    for i in range(length):
        data[i] = 0
    for _ in range(100):
        start = rng.randrange(length)
        size = 25
        for _ in range(100):
            data[(start + rng.randrange(size)) % length] = rng.randrange(256)
    for i in range(length):
        total += data[i]
    print(f"focus result is {total}")
    return total


PROGRAMS = {
    'sort': sort_program,
    'scan': scan_program,
    'focus': focus_program,
}
