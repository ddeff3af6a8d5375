import sys
from pathlib import Path

from chefbook.db import init_db, SessionLocal
from chefbook.seed import import_seed, load_seed


def main():
    init_db()
    default = Path(__file__).resolve().parents[1] / 'data' / 'seed.json'
    p = Path(sys.argv[1]) if len(sys.argv) > 1 else default
    data = load_seed(p)
    if not data:
        print(f'{p} not found')
        return
    db = SessionLocal()
    try:
        added = import_seed(db, data)
    finally:
        db.close()
    print(
        f"Imported {added['chefs']} chefs, "
        f"{added['ingredients']} ingredients, "
        f"{added['recipes']} recipes"
    )


if __name__ == '__main__':
    main()
