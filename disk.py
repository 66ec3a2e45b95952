from page_table import PAGE_SIZE


class Disk:
    """
    Block storage with one block per virtual page. Kept in memory unless a
    path is given, in which case the blocks live in that file (created or
    truncated on open).
    """

    def __init__(self, num_blocks, block_size=PAGE_SIZE, path=None):
        if num_blocks <= 0:
            raise ValueError(f"Disk needs at least one block, got {num_blocks}")
        self.num_blocks = num_blocks
        self.block_size = block_size
        self.path = path
        self.file = None
        self.blocks = None

        if path is None:
            self.blocks = [bytearray(block_size) for _ in range(num_blocks)]
        else:
            self.file = open(path, 'w+b')
            self.file.truncate(num_blocks * block_size)

    def _check(self, block, buf):
        if block < 0 or block >= self.num_blocks:
            raise ValueError(f"Block {block} out of range (0 .. {self.num_blocks - 1})")
        if len(buf) != self.block_size:
            raise ValueError(f"Buffer is {len(buf)} bytes, expected {self.block_size}")

    def read_block(self, block, buf):
        self._check(block, buf)
        if self.file is None:
            buf[:] = self.blocks[block]
        else:
            self.file.seek(block * self.block_size)
            buf[:] = self.file.read(self.block_size)

    def write_block(self, block, data):
        self._check(block, data)
        if self.file is None:
            self.blocks[block][:] = data
        else:
            self.file.seek(block * self.block_size)
            self.file.write(data)

    def close(self):
        if self.file is not None:
            self.file.close()
            self.file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
