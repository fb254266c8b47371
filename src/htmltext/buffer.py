class OutputBuffer:
    """Append-only text sink for one extraction run.

    Text is gathered as chunks and joined once at the end. The only
    non-append operation is ``pop_since``, which hands back (and removes)
    everything written after a given length so it can be rewritten.
    """

    __slots__ = ("_chunks", "_length")

    def __init__(self):
        self._chunks = []
        self._length = 0

    def __len__(self):
        return self._length

    def clear(self):
        self._chunks.clear()
        self._length = 0

    def append(self, text):
        if text:
            self._chunks.append(text)
            self._length += len(text)

    def pop_since(self, length):
        if length >= self._length:
            return ""
        value = "".join(self._chunks)
        self._chunks = [value[:length]] if length > 0 else []
        self._length = max(length, 0)
        return value[length:]

    def getvalue(self):
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""
