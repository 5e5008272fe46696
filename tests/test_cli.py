import unittest
from unittest.mock import MagicMock, patch
from data.repository import StorageRegistry
from presentation.cli import handle_command, run_interactive
from io import StringIO
import sys

class TestCLI(unittest.TestCase):
    def setUp(self):
        self.registry = StorageRegistry()

    def run_command(self, command):
        # Redirect stdout to capture print output
        captured_output = StringIO()
        sys.stdout = captured_output
        try:
            handle_command(command, registry=self.registry)
        finally:
            sys.stdout = sys.__stdout__  # Reset stdout
        return captured_output.getvalue().strip()

    def test_add_command(self):
        output = self.run_command('add ITEM001 "Wireless Mouse" "Aisle 2, Shelf 3"')
        self.assertEqual(output, "Added ITEM001 - Wireless Mouse.")
        self.assertIn("ITEM001", self.registry)

    def test_add_duplicate_command(self):
        self.run_command('add ITEM001 "Wireless Mouse" "Aisle 2, Shelf 3"')
        output = self.run_command('add ITEM001 "Wireless Mouse" "Aisle 4, Shelf 2"')
        self.assertEqual(output, "Error: Item with ID ITEM001 already exists.")

    def test_add_usage(self):
        self.assertEqual(self.run_command("add ITEM001 Mouse"), "Usage: add <id> <description> <location>")

    def test_find_command(self):
        self.run_command('add ITEM002 Airpods "Aisle 1, Shelf 7"')
        self.assertEqual(self.run_command("find ITEM002"), "Located: Airpods in Aisle 1, Shelf 7")
        self.assertEqual(self.run_command("find ITEM003"), "Error: Item with ID ITEM003 not found.")

    def test_remove_command(self):
        self.run_command('add ITEM002 Airpods "Aisle 1, Shelf 7"')
        self.assertEqual(self.run_command("remove ITEM002"), "Removed ITEM002.")
        self.assertEqual(self.run_command("remove ITEM002"), "Error: Item with ID ITEM002 not found.")

    def test_list_command(self):
        self.run_command('add ITEM001 "Wireless Mouse" "Aisle 2, Shelf 3"')
        self.run_command('add ITEM002 Airpods "Aisle 1, Shelf 7"')
        self.assertEqual(self.run_command("list"), (
            "Items in Description Order:\n"
            "- Airpods: Aisle 1, Shelf 7\n"
            "- Wireless Mouse: Aisle 2, Shelf 3"
        ))

    def test_list_empty(self):
        self.assertEqual(self.run_command("list"), "Items in Description Order:")

    @patch("logic.services.requests.get")
    def test_import_command(self, mock_get):
        response = MagicMock()
        response.json.return_value = [
            {"id": "ITEM001", "description": "Wireless Mouse", "location": "Aisle 2, Shelf 3"},
            {"id": "ITEM001", "description": "Wireless Mouse", "location": "Aisle 4, Shelf 2"},
        ]
        mock_get.return_value = response
        output = self.run_command("import https://inventory.example.com/items.json")
        self.assertEqual(output, "Imported 1 item(s), skipped 1 duplicate(s).")

    def test_unbalanced_quotes(self):
        self.assertTrue(self.run_command('add ITEM001 "Wireless Mouse').startswith("Error:"))

    def test_empty_command(self):
        self.assertEqual(self.run_command("   "), "")

    def test_help_command(self):
        self.assertIn("Usage: find <id>", self.run_command("help"))

    @patch("builtins.input")
    def test_interactive_loop_stops_at_end_of_input(self, mock_input):
        mock_input.side_effect = ['add ITEM002 Airpods "Aisle 1, Shelf 7"', EOFError]
        captured_output = StringIO()
        sys.stdout = captured_output
        try:
            run_interactive(registry=self.registry)
        finally:
            sys.stdout = sys.__stdout__
        self.assertEqual(captured_output.getvalue().strip(), "Added ITEM002 - Airpods.")
        self.assertEqual(mock_input.call_count, 2)

    @patch("builtins.input")
    def test_interactive_loop_exit_command(self, mock_input):
        mock_input.side_effect = ["exit"]
        run_interactive(registry=self.registry)
        self.assertEqual(mock_input.call_count, 1)

    def test_unknown_command(self):
        self.assertEqual(self.run_command("unknown"), "Unknown command.")

if __name__ == "__main__":
    unittest.main()
