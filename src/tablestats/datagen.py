"""Synthetic CSV generator.

Writes employee-style rows with a mix of integer, float, boolean, date and
free-text columns. Large outputs are useful for exercising the sampler.
"""

from __future__ import annotations

import csv
import random
from collections.abc import Callable, Iterator
from itertools import islice
from pathlib import Path

HEADER = [
    "id",
    "name",
    "email",
    "age",
    "salary",
    "department",
    "join_date",
    "active",
    "score",
    "category",
]

DEPARTMENTS = ["Engineering", "Marketing", "Sales", "HR", "Finance", "Operations", "Legal", "IT"]
CATEGORIES = ["A", "B", "C", "D", "E"]
DOMAINS = ["gmail.com", "yahoo.com", "company.com", "outlook.com", "hotmail.com"]
FIRST_NAMES = [
    "John", "Jane", "Michael", "Sarah", "David", "Lisa", "Robert", "Emily", "James", "Ashley",
    "Chris", "Jessica", "Daniel", "Amanda", "Matthew", "Nicole", "William", "Jennifer",
    "Richard", "Michelle", "Joseph", "Kimberly", "Thomas", "Amy", "Charles", "Angela",
    "Christopher", "Brenda", "Mark", "Emma",
]  # fmt: skip
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez",
    "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor",
    "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez",
    "Clark", "Ramirez", "Lewis", "Robinson",
]  # fmt: skip


def generate_row(row_id: int, rng: random.Random) -> list[str]:
    """Build one synthetic row."""
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    email = f"{first.lower()}.{last.lower()}{rng.randrange(9999)}@{rng.choice(DOMAINS)}"
    join_date = f"{rng.randint(2015, 2023)}-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
    return [
        str(row_id),
        f"{first} {last}",
        email,
        str(rng.randint(22, 65)),
        str(rng.randint(30_000, 149_999)),
        rng.choice(DEPARTMENTS),
        join_date,
        "true" if rng.random() < 0.5 else "false",
        f"{rng.random() * 100:.2f}",
        rng.choice(CATEGORIES),
    ]


def generate_rows(count: int, rng: random.Random) -> Iterator[list[str]]:
    """Yield count rows with ids starting at 1."""
    for row_id in range(1, count + 1):
        yield generate_row(row_id, rng)


def write_csv(
    path: str | Path,
    rows: int,
    seed: int | None = None,
    delimiter: str = ",",
    progress: Callable[[int], None] | None = None,
) -> Path:
    """Write a synthetic file with a header and rows data rows.

    Args:
        path: Output file
        rows: Number of data rows
        seed: Seed for reproducible output
        delimiter: Field delimiter
        progress: Called with the number of rows written every 10,000 rows

    Returns:
        The output path
    """
    out = Path(path)
    rng = random.Random(seed)
    with out.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter=delimiter, lineterminator="\n")
        writer.writerow(HEADER)
        for written, row in enumerate(generate_rows(rows, rng), start=1):
            writer.writerow(row)
            if progress and written % 10_000 == 0:
                progress(written)
    return out


def read_preview(path: str | Path, delimiter: str = ",", count: int = 5) -> list[list[str]]:
    """Read the first count records of a file, header included."""
    with Path(path).open(newline="", encoding="utf-8") as f:
        return list(islice(csv.reader(f, delimiter=delimiter), count))
