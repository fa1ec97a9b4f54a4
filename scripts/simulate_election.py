"""Run a village election, either from a JSON document or a simulated electorate.

Without --input, generates candidates and voters using faker with a fixed
seed, lets a share of the voters cast a vote (some of them too young to be
registered, so their votes are refused) and prints the standings.

Usage:
    python scripts/simulate_election.py
    python scripts/simulate_election.py --voters 500 --seed 7 -o report.json
    python scripts/simulate_election.py --input election.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from faker import Faker

# Allow running as a plain script from the project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from panchayat.analyze import ElectionDocumentError, run_election  # noqa: E402
from panchayat.models import ElectionReport  # noqa: E402

SEED = 20260201
PARTIES = ["Janata", "Lok", "Kisan", "Gram Vikas"]
DEFAULT_VOTERS = 100
TURNOUT_PERCENT = 80


def generate_document(num_voters: int, num_candidates: int, seed: int) -> dict[str, Any]:
    """Generate an election document with fake candidates and voters.

    The same seed always produces the same document.
    """
    fake = Faker("en_IN")
    Faker.seed(seed)

    candidates = [
        {
            "id": f"C{i}",
            "name": fake.name(),
            "party": PARTIES[(i - 1) % len(PARTIES)],
        }
        for i in range(1, num_candidates + 1)
    ]

    voters = [
        {"id": f"V{i}", "name": fake.name(), "age": fake.random_int(min=14, max=90)}
        for i in range(1, num_voters + 1)
    ]

    votes = []
    for voter in voters:
        if fake.boolean(chance_of_getting_true=TURNOUT_PERCENT):
            candidate = fake.random_element(candidates)
            votes.append({"voter_id": voter["id"], "candidate_id": candidate["id"]})

    return {
        "name": f"{fake.city()} Gram Panchayat",
        "candidates": candidates,
        "voters": voters,
        "votes": votes,
    }


def print_report(report: ElectionReport):
    print(report.name)
    for position, result in enumerate(report.results, start=1):
        print(f"  {position}. {result.name} ({result.party}): {result.votes}")
    if report.winner is None:
        print("No votes were counted.")
    else:
        print(f"Winner: {report.winner.name} ({report.winner.party})")
    print(f"{report.votes_counted} votes counted, "
          f"{len(report.rejected_voters)} voters refused registration, "
          f"{len(report.rejected_votes)} votes refused")


def main():
    parser = argparse.ArgumentParser(
        description="Run a panchayat election and print the results")
    parser.add_argument("-i", "--input",
                        help="Election document (JSON) to run instead of a simulation")
    parser.add_argument("--voters", type=int, default=DEFAULT_VOTERS,
                        help=f"Number of simulated voters (default: {DEFAULT_VOTERS})")
    parser.add_argument("--candidates", type=int, default=len(PARTIES),
                        help=f"Number of simulated candidates (default: {len(PARTIES)})")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Seed for the simulation (default: {SEED})")
    parser.add_argument("-o", "--output",
                        help="Write the report as JSON to this path")
    args = parser.parse_args()

    if args.input:
        document = json.loads(Path(args.input).read_text(encoding="utf-8"))
    else:
        document = generate_document(args.voters, args.candidates, args.seed)
        print(f"Simulated {len(document['voters'])} voters and "
              f"{len(document['candidates'])} candidates")

    try:
        report = run_election(document)
    except ElectionDocumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print_report(report)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(report.to_dict(), ensure_ascii=False, indent=2),
                               encoding="utf-8")
        print(f"Written to {output_path}")


if __name__ == "__main__":
    main()
