import argparse
from loguru import logger

from gridsort.core.config import ConfigManager
from gridsort.core.logging import setup_logging
from gridsort.data import Collection, PageableCollection
from gridsort.ui.header import Header

PEOPLE = [
    {"name": "Carol", "age": 30},
    {"name": "Alice", "age": 10},
    {"name": "Bob", "age": 20},
    {"name": "Dave", "age": 25},
]

COLUMNS = [
    {"name": "name", "label": "Name"},
    {"name": "age", "label": "Age"},
    {"name": "note", "label": "Note", "sortable": False},
]


def show(header: Header, collection: Collection):
    active = header.row.active_column() or "-"
    rows = ", ".join(f"{r.get('name')}({r.get('age')})" for r in collection)
    print(f"  sorted by {active:<5} {[d.value for d in header.row.directions().values()]}  [{rows}]")


def main():
    parser = argparse.ArgumentParser(description="Click through a sortable grid header")
    parser.add_argument("--config", default="gridsort.json", help="JSON or TOML config file")
    parser.add_argument("--paged", action="store_true", help="Use a client-paged collection")
    args = parser.parse_args()

    print("--- 1. Initialize Core ---")
    config = ConfigManager(args.config)
    setup_logging(config.data.general.debug_mode, config.data.general.log_dir, config.data.general.log_to_file)

    print("--- 2. Build Header ---")
    if args.paged:
        collection = PageableCollection(PEOPLE, settings=config.data.paging.model_copy(update={"mode": "client"}))
    else:
        collection = Collection(PEOPLE)
    header = Header(columns=COLUMNS, collection=collection)
    for label in header.render():
        print(f"  {label.text}{' ^' if label.sortable else ''}")

    print("--- 3. Click Headers ---")
    show(header, collection)
    for name in ("age", "age", "name", "note", "name", "name"):
        print(f"click {name}")
        header.row.activate(name)
        show(header, collection)

    header.remove()
    logger.info("Header removed")


if __name__ == "__main__":
    main()
