#!/usr/bin/env python3
"""
Seed script to add the built-in sample prompts to the local store.

Usage:
    python scripts/seed_prompts.py
"""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from promptvault.config import ensure_data_dir
from promptvault.database import get_engine, get_session_factory, init_db
from promptvault.samples import SAMPLE_PROMPTS, seed_sample_prompts


if __name__ == "__main__":
    ensure_data_dir()
    init_db(get_engine())

    db = get_session_factory()()
    try:
        print("Seeding sample prompts...")
        created = seed_sample_prompts(db)
        print(f"Done! {len(created)} added, {len(SAMPLE_PROMPTS) - len(created)} already present.")
    finally:
        db.close()
