# Command-line interface

import shlex

from logic.services import (
    create_item_service,
    get_item_service,
    import_items_service,
    list_items_service,
    remove_item_service,
)
from utils.helpers import format_listing, is_success

USAGE = {
    "add": "Usage: add <id> <description> <location>",
    "find": "Usage: find <id>",
    "remove": "Usage: remove <id>",
    "list": "Usage: list",
    "import": "Usage: import <url>",
}

def handle_command(command, registry=None):
    """
    Handles user commands.
    Arguments containing spaces must be quoted, e.g. add ITEM001 "Wireless Mouse" "Aisle 2, Shelf 3".
    """
    try:
        parts = shlex.split(command)
    except ValueError as e:
        print(f"Error: {e}")
        return
    if not parts:
        return
    action, args = parts[0], parts[1:]

    if action == "help":
        for line in USAGE.values():
            print(line)
    elif action == "add":
        if len(args) != 3:
            print(USAGE["add"])
            return
        result = create_item_service(*args, registry=registry)
        if is_success(result):
            print(f"Added {result['data']['id']} - {result['data']['description']}.")
        else:
            print(f"Error: {result['data']}")
    elif action == "find":
        if len(args) != 1:
            print(USAGE["find"])
            return
        result = get_item_service(args[0], registry=registry)
        if is_success(result):
            print(f"Located: {result['data']['description']} in {result['data']['location']}")
        else:
            print(f"Error: {result['data']}")
    elif action == "remove":
        if len(args) != 1:
            print(USAGE["remove"])
            return
        result = remove_item_service(args[0], registry=registry)
        if is_success(result):
            print(f"Removed {result['data']}.")
        else:
            print(f"Error: {result['data']}")
    elif action == "list":
        if args:
            print(USAGE["list"])
            return
        result = list_items_service(registry=registry)
        print(format_listing((entry["description"], entry["location"]) for entry in result["data"]))
    elif action == "import":
        if len(args) != 1:
            print(USAGE["import"])
            return
        result = import_items_service(args[0], registry=registry)
        if is_success(result):
            summary = result["data"]
            print(f"Imported {len(summary['added'])} item(s), skipped {len(summary['duplicates'])} duplicate(s).")
        else:
            print(f"Error: {result['data']}")
    else:
        print("Unknown command.")

def run_interactive(registry=None):
    """
    Reads commands until 'exit' or end of input.
    """
    while True:
        try:
            user_input = input("Enter command (e.g., 'add ITEM001 \"Wireless Mouse\" \"Aisle 2, Shelf 3\"', 'list', 'help', 'exit'): ")
        except EOFError:
            break
        if user_input.strip().lower() == "exit":
            break
        handle_command(user_input, registry=registry)

if __name__ == "__main__":
    run_interactive()
