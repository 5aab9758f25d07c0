"""Generator of random species-by-site occurrence matrices."""

from __future__ import annotations

import random
import sys


def generate_sites(
    num_species: int, num_sites: int, prob: float, rng: random.Random | None = None
) -> str:
    """Return an occurrence matrix in text form.

    Each entry is 1 with probability ``prob``; one randomly chosen species
    (possibly none, if the draw equals ``num_species``) is present everywhere.
    """
    rng = rng if rng is not None else random.Random()
    root_species = rng.randint(0, num_species)
    lines = [f"{num_species} {num_sites}\n"]
    for i in range(num_species):
        if i == root_species:
            row = "1 " * num_sites
        else:
            row = "".join("1 " if rng.random() < prob else "0 " for _ in range(num_sites))
        lines.append(f"{row}s{i}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print a random occurrence matrix for the given species, sites and probability."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print(
            "Usage: site_gen <number-of-species> <number-of_sites> <probabilty-of-1>",
            file=sys.stderr,
        )
        return 1
    try:
        num_species = int(args[0])
        num_sites = int(args[1])
        prob = float(args[2])
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(generate_sites(num_species, num_sites, prob))
    return 0


if __name__ == "__main__":
    sys.exit(main())