"""Random-position sampling of delimited files.

Large files are not scanned. Instead the sampler seeks to a handful of
random byte offsets, throws away the partial line it lands in, and parses a
small batch of records from each offset. The bytes consumed per record give
an estimate of how many rows the whole file holds.
"""

from __future__ import annotations

import csv
import math
import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import BinaryIO

import numpy as np
from scipy import stats as scipy_stats

from tablestats.core.logging import get_logger
from tablestats.core.models import SamplingConfig

logger = get_logger(__name__)


class LineSource:
    """Iterate the lines of a binary file as text, for csv.reader.

    The handle's tell() stays exact because lines are read one at a time.
    errors is the codec error handler and can be switched between the
    header ("strict") and the data rows ("replace"). Lines handed out since
    the last take_pending() call are kept so a parsed record can be checked
    against its raw text.
    """

    def __init__(self, handle: BinaryIO, encoding: str = "utf-8", errors: str = "strict"):
        self.handle = handle
        self.encoding = encoding
        self.errors = errors
        self.pending: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        raw = self.handle.readline()
        if not raw:
            raise StopIteration
        line = raw.decode(self.encoding, self.errors)
        self.pending.append(line)
        return line

    def take_pending(self) -> str:
        """Return the raw text read since the last call and forget it."""
        text = "".join(self.pending)
        self.pending = []
        return text


def has_bare_quote(raw: str, delimiter: str, quotechar: str = '"') -> bool:
    """Check raw record text for a quote inside an unquoted field.

    The csv module keeps such quotes as literal characters; they are treated
    as malformed here. This matters after a seek lands inside a multi-line
    quoted field: the line holding its closing half looks like an unquoted
    record ending in a stray quote.
    """
    if quotechar not in raw:
        return False

    in_quotes = False
    field_start = True
    skip_next = False
    for i, ch in enumerate(raw):
        if skip_next:
            skip_next = False
            continue
        if in_quotes:
            if ch == quotechar:
                if raw[i + 1 : i + 2] == quotechar:
                    skip_next = True
                else:
                    in_quotes = False
            continue
        if ch == quotechar:
            if not field_start:
                return True
            in_quotes = True
            field_start = False
        elif ch == delimiter or ch in "\r\n":
            field_start = True
        else:
            field_start = False
    return False


def iter_records(lines: LineSource, delimiter: str, limit: int | None = None) -> Iterator[list[str]]:
    """Yield parsed records, dropping malformed ones.

    A record is malformed when the csv module rejects it or when it holds a
    bare quote. Blank lines are skipped and do not count as records.
    """
    reader = csv.reader(lines, delimiter=delimiter, strict=True)
    produced = 0
    while limit is None or produced < limit:
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            lines.take_pending()
            logger.debug("malformed_record_skipped", error=str(e))
            continue
        raw = lines.take_pending()
        if not record:
            continue
        if has_bare_quote(raw, delimiter):
            logger.debug("malformed_record_skipped", error="bare quote in non-quoted field")
            continue
        produced += 1
        yield record


@dataclass
class SampleBatch:
    """Records collected from random positions plus byte accounting."""

    records: list[list[str]] = field(default_factory=list)
    bytes_consumed: int = 0
    # Per successful position: (bytes consumed, records parsed)
    positions: list[tuple[int, int]] = field(default_factory=list)
    positions_skipped: int = 0


def sample_records(
    handle: BinaryIO,
    file_size: int,
    config: SamplingConfig,
    delimiter: str,
    rng: random.Random,
) -> SampleBatch:
    """Collect up to config.sample_size records from random offsets.

    Offsets are drawn uniformly from [file_size // 100, file_size); the first
    percent of the file is skipped to stay clear of the header. A position
    whose seek or read fails is skipped and not retried.

    Args:
        handle: Binary file handle opened for reading
        file_size: Size of the file in bytes
        config: Sampling configuration
        delimiter: Field delimiter
        rng: Random source used to pick offsets

    Returns:
        SampleBatch truncated to exactly sample_size records at most
    """
    batch = SampleBatch()
    records_per_position = max(1, config.sample_size // config.random_positions)
    min_pos = file_size // 100

    for _ in range(config.random_positions):
        start = rng.randrange(min_pos, file_size)
        try:
            handle.seek(start)
            # Skip to the next complete line
            handle.readline()
            lines = LineSource(handle, errors="replace")
            records = list(iter_records(lines, delimiter, records_per_position))
            end = handle.tell()
        except OSError as e:
            logger.debug("sampling_position_skipped", offset=start, error=str(e))
            batch.positions_skipped += 1
            continue

        consumed = end - start
        batch.bytes_consumed += consumed
        batch.positions.append((consumed, len(records)))
        batch.records.extend(records)

        if len(batch.records) >= config.sample_size:
            break

    del batch.records[config.sample_size :]
    return batch


def estimate_row_count(file_size: int, bytes_consumed: int, config: SamplingConfig) -> int:
    """Extrapolate the number of rows from the sampled byte density.

    Average bytes per record is bytes_consumed / sample_size; the estimate
    assumes rows are uniformly sized across the file.

    Returns:
        Estimated row count, or 0 when nothing was consumed
    """
    avg_bytes_per_record = bytes_consumed / config.sample_size
    if avg_bytes_per_record <= 0:
        return 0
    return int(file_size / avg_bytes_per_record)


def estimate_row_interval(
    file_size: int,
    positions: list[tuple[int, int]],
    confidence: float,
) -> tuple[int, int] | None:
    """Confidence interval for the row count from per-position densities.

    Bytes per record is treated as a ratio estimate over the sampled
    positions; its standard error gives a normal-theory interval which is
    then inverted into row counts.

    Args:
        file_size: Size of the file in bytes
        positions: (bytes consumed, records parsed) per sampled position
        confidence: Confidence level in (0, 1)

    Returns:
        (low, high) row counts, or None with fewer than two usable positions
    """
    usable = [(b, r) for b, r in positions if r > 0]
    if len(usable) < 2:
        return None

    consumed = np.array([b for b, _ in usable], dtype=np.float64)
    counts = np.array([r for _, r in usable], dtype=np.float64)
    k = len(usable)

    ratio = consumed.sum() / counts.sum()
    residuals = consumed - ratio * counts
    std_err = math.sqrt(float((residuals**2).sum()) / (k - 1)) / (math.sqrt(k) * counts.mean())
    z = float(scipy_stats.norm.ppf((1 + confidence) / 2))

    high_density = ratio + z * std_err
    low_density = ratio - z * std_err

    low = int(file_size / high_density)
    # Each row holds at least its newline
    high = int(file_size / low_density) if low_density > 0 else file_size
    return low, min(high, file_size)
