class BitWriter: # Packs bits MSB-first into an in-memory byte buffer
    def __init__(self):
        self.buf = bytearray()
        self.acc = 0 # pending bits of the current byte
        self.acc_bits = 0
        self.bit_count = 0 # total bits written so far

    def write_bit(self, bit: int) -> None:
        self.acc = (self.acc << 1) | (1 if bit else 0)
        self.acc_bits += 1
        self.bit_count += 1
        if self.acc_bits == 8:
            self.buf.append(self.acc & 0xFF)
            self.acc = 0
            self.acc_bits = 0

    def write_byte(self, value: int) -> None:
        for i in range(7, -1, -1):
            self.write_bit((value >> i) & 1)

    def write_uint32(self, value: int) -> None: # big-endian
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"value {value} does not fit in 32 bits")
        for shift in (24, 16, 8, 0):
            self.write_byte((value >> shift) & 0xFF)

    def write_code(self, code: str) -> None: # code is a string of '0'/'1'
        for ch in code:
            self.write_bit(1 if ch == '1' else 0)

    def getvalue(self) -> bytes:
        """
        Returns the packed bytes; a partial trailing byte is zero-padded
        Writing may continue afterwards, the padding is not committed
        """
        out = bytearray(self.buf)
        if self.acc_bits != 0:
            out.append((self.acc << (8 - self.acc_bits)) & 0xFF)
        return bytes(out)


class BitReader: # Reads bits MSB-first from a byte buffer
    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.total_bits = len(self.data) * 8
        self.pos = 0 # index of the next bit to read

    @property
    def bits_remaining(self) -> int:
        return self.total_bits - self.pos

    def read_bit(self) -> int:
        if self.pos >= self.total_bits:
            raise EOFError(f"bitstream exhausted after {self.total_bits} bits")
        byte = self.data[self.pos >> 3]
        bit = (byte >> (7 - (self.pos & 7))) & 1
        self.pos += 1
        return bit

    def read_byte(self) -> int:
        value = 0
        for _ in range(8):
            value = (value << 1) | self.read_bit()
        return value

    def read_uint32(self) -> int:
        value = 0
        for _ in range(4):
            value = (value << 8) | self.read_byte()
        return value
