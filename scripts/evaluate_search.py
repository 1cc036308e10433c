#!/usr/bin/env python3
"""
Evaluate ranking quality (MRR@k) against an evaluation set.

The evaluation set is a JSON array of {"query": ..., "url": ...} pairs.

Usage:
    python scripts/evaluate_search.py [--index data/search-index.json] [--eval data/evaluation_set.json]
"""

import argparse
import asyncio
import json
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from sitesearch.core.config import settings
from sitesearch.search import SearchEngine, SearchIndex

EVAL_FILE = "data/evaluation_set.json"


def load_eval_set(path: str) -> list[dict]:
    if not os.path.exists(path):
        print(f"Evaluation file not found at {path}.")
        return []
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def evaluate_mrr(engine: SearchEngine, eval_set: list[dict], k: int = 10) -> float:
    score_sum = 0.0
    for case in eval_set:
        query = case["query"]
        target_url = case["url"]

        res = engine.search(query)

        rank = 0
        for i, hit in enumerate(res.hits[:k]):
            if hit.href.split("#", 1)[0] == target_url:
                rank = i + 1
                break

        if rank > 0:
            score_sum += 1.0 / rank
        print(f"Query: '{query}' -> Rank: {rank if rank else 'Not Found'}")

    if not eval_set:
        return 0.0
    return score_sum / len(eval_set)


def main():
    parser = argparse.ArgumentParser(description="Evaluate search ranking (MRR)")
    parser.add_argument("--index", default=settings.INDEX_SOURCE, help="Index JSON")
    parser.add_argument("--eval", default=EVAL_FILE, help="Evaluation set JSON")
    parser.add_argument("-k", type=int, default=10)
    args = parser.parse_args()

    eval_set = load_eval_set(args.eval)
    if not eval_set:
        return

    engine = SearchEngine(SearchIndex(args.index))
    if not asyncio.run(engine.load()):
        print(f"Could not load index: {args.index}")
        return

    print(f"Evaluating {len(eval_set)} queries...")
    mrr = evaluate_mrr(engine, eval_set, k=args.k)
    print(f"\nMRR@{args.k}: {mrr:.4f}")


if __name__ == "__main__":
    main()
