# wflcg/generator.py
# WFLCG: buffered multi-lane 32-bit LCG used directly and by the benchmark scripts.
# State: 16 uint32 lanes + cursor. Each lane has its own multiplier/increment and
# all lanes are advanced together in one vectorized pass when the buffer runs out.

import logging

import numpy as np

VERSION = 0x010001
VERSION_STRING = "1.0.1"
COPYRIGHT_STRING = "WFLCG v" + VERSION_STRING + " (C)2019 Juha Nieminen"

BUFFER_SIZE = 16
MASK32 = (1 << 32) - 1

# seeding steps (multiplier, increment)
SEED1_STEP = (2364742333, 14567)
SEED2_STEP = (4112992229, 12345)

FLOAT_ONE_BITS = 0x3F800000
DOUBLE_ONE_BITS = 0x3FF0000000000000


def _readonly(values):
    arr = np.array(values, dtype=np.uint32)
    arr.flags.writeable = False
    return arr


MULTIPLIERS = _readonly([
    3363461597, 3169304909, 2169304933, 2958304901,
    2738319061, 2738319613, 3238311437, 1238311381,
    1964742293, 1964743093, 2364742333, 2312912477,
    2312913061, 1312912501, 2812992317, 4112992229,
])

INCREMENTS = _readonly([
    8346591, 18134761, 12345, 234567,
    14567, 12345, 123123, 11223345,
    123131, 83851, 14567, 134567,
    34567, 32145, 123093, 12345,
])

logger = logging.getLogger('wflcg')


def lcg_step(x, mult, inc):
    return (x * mult + inc) & MASK32


def fold(value):
    """XOR the high byte into the low byte."""
    return value ^ (value >> 24)


def float_from_bits(value):
    # top 23 bits of the lane become the mantissa of a float in [1, 2)
    return float(np.uint32(FLOAT_ONE_BITS | (value >> 9)).view(np.float32))


def double_from_bits(value):
    return float(np.uint64(DOUBLE_ONE_BITS | (value << 20)).view(np.float64))


def double_from_pair(value1, value2):
    return float(np.uint64(DOUBLE_ONE_BITS | ((value1 << 20) ^ (value2 >> 4))).view(np.float64))


class WFLCG:
    """Buffered lane generator.

    WFLCG() is the default generator (same as seed 0), WFLCG(seed) uses one
    seed and WFLCG(seed1, seed2) interleaves two seed streams into the lanes.
    Instances are not thread-safe; give every thread its own generator.
    """

    def __init__(self, seed1=None, seed2=None):
        self._buffer = np.zeros(BUFFER_SIZE, dtype=np.uint32)
        self._index = 0
        if seed1 is None and seed2 is None:
            self.init_default()
        elif seed2 is None:
            self.init_from_one_seed(seed1)
        else:
            self.init_from_two_seeds(0 if seed1 is None else seed1, seed2)

    # --- seeding ---

    def init_from_one_seed(self, seed):
        mult, inc = SEED1_STEP
        seed = lcg_step(int(seed) & MASK32, mult, inc)
        for i in range(BUFFER_SIZE):
            seed = lcg_step(seed, mult, inc)
            self._buffer[i] = seed
        self._index = 0
        logger.debug("seeded lanes from one seed, lane[0]=%08x", seed)

    def init_from_two_seeds(self, seed1, seed2):
        mult1, inc1 = SEED1_STEP
        mult2, inc2 = SEED2_STEP
        seed1 = lcg_step(int(seed1) & MASK32, mult1, inc1)
        seed2 = lcg_step(int(seed2) & MASK32, mult2, inc2)
        for i in range(0, BUFFER_SIZE, 2):
            seed1 = lcg_step(seed1, mult1, inc1)
            seed2 = lcg_step(seed2, mult2, inc2)
            self._buffer[i] = seed1
            self._buffer[i + 1] = seed2
        self._index = 0
        logger.debug("seeded lanes from two seeds")

    def init_default(self):
        self.init_from_one_seed(0)

    # --- state advance ---

    def refill_buffer(self):
        # uint32 array arithmetic wraps modulo 2**32
        np.multiply(self._buffer, MULTIPLIERS, out=self._buffer)
        np.add(self._buffer, INCREMENTS, out=self._buffer)
        self._index = 0

    @property
    def cursor(self):
        return self._index

    # --- value extraction ---

    def next_u32(self):
        if self._index == BUFFER_SIZE:
            self.refill_buffer()
        result = fold(int(self._buffer[self._index]))
        self._index += 1
        return result

    __call__ = next_u32

    def __iter__(self):
        while True:
            yield self.next_u32()

    def next_float(self):
        """Float in [1.0, 2.0) built from the raw (unfolded) lane."""
        if self._index == BUFFER_SIZE:
            self.refill_buffer()
        value = int(self._buffer[self._index])
        self._index += 1
        return float_from_bits(value)

    def next_double(self):
        """Double in [1.0, 2.0) carrying 32 bits from next_u32()."""
        return double_from_bits(self.next_u32())

    def next_double2(self):
        """Double in [1.0, 2.0) from two raw lanes (52 mantissa bits).

        Both lanes come from the same buffer: the buffer is refilled first
        when fewer than two lanes are left.
        """
        if self._index >= BUFFER_SIZE - 1:
            self.refill_buffer()
        value1 = int(self._buffer[self._index])
        value2 = int(self._buffer[self._index + 1])
        self._index += 2
        return double_from_pair(value1, value2)

    # --- direct buffer access (no cursor movement, no refill) ---

    def buffer_view(self):
        view = self._buffer.view()
        view.flags.writeable = False
        return view

    def buffer_element_as_float(self, index):
        assert 0 <= index < BUFFER_SIZE, index
        return float_from_bits(int(self._buffer[index]))

    def buffer_element_as_double(self, index):
        assert 0 <= index < BUFFER_SIZE, index
        return double_from_bits(fold(int(self._buffer[index])))

    def buffer_element_as_double2(self, index):
        assert 0 <= index < BUFFER_SIZE - 1, index
        return double_from_pair(int(self._buffer[index]), int(self._buffer[index + 1]))

    def buffer_as_floats(self):
        bits = (self._buffer >> np.uint32(9)) | np.uint32(FLOAT_ONE_BITS)
        return bits.view(np.float32)

    def buffer_as_doubles(self):
        folded = (self._buffer ^ (self._buffer >> np.uint32(24))).astype(np.uint64)
        bits = (folded << np.uint64(20)) | np.uint64(DOUBLE_ONE_BITS)
        return bits.view(np.float64)

    def __repr__(self):
        return f"WFLCG(cursor={self._index})"
