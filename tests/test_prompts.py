import sys
import os
import unittest
from unittest.mock import patch

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

# Add the parent directory to sys.path to import the kimaipy package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from kimaipy.ui import prompts


class TestPrompts(unittest.TestCase):
    """Test the interactive pickers without a terminal."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_projects = [
            {"id": 1, "name": "Website"},
            {"id": 2, "name": "Internal"},
            {"id": 3, "name": "Webshop"}
        ]

    def test_fuzzy_filter(self):
        """Typed characters must appear in order, in any case."""
        names = [p["name"] for p in self.mock_projects]

        self.assertCountEqual(prompts.fuzzy_filter("wbs", names), ["Website", "Webshop"])
        self.assertEqual(prompts.fuzzy_filter("INTL", names), ["Internal"])
        self.assertEqual(prompts.fuzzy_filter("xyz", names), [])

    def test_fuzzy_filter_empty_input(self):
        """Nothing typed yet shows every name."""
        names = [p["name"] for p in self.mock_projects]
        self.assertEqual(prompts.fuzzy_filter("", names), names)

    def test_fuzzy_filter_multi_word_names(self):
        """Spaces are part of the search; the whole input is matched."""
        names = ["Acme Corp", "Xylo"]

        self.assertEqual(prompts.fuzzy_filter("acme c", names), ["Acme Corp"])
        self.assertEqual(prompts.fuzzy_filter("acme corp", names), ["Acme Corp"])
        self.assertEqual(prompts.fuzzy_filter("acme x", names), [])
        self.assertEqual(prompts.fuzzy_filter("ac cp", names), ["Acme Corp"])

    def test_completion_replaces_whole_input(self):
        """Accepting a completion leaves exactly the chosen name in the field."""
        names = ["Acme Corp", "Xylo"]
        for text in ("acme c", "acme ", "ac"):
            with self.subTest(text=text):
                document = Document(text, len(text))
                completions = list(prompts.name_completer(names).get_completions(document, CompleteEvent()))

                self.assertEqual([c.text for c in completions], ["Acme Corp"])
                self.assertEqual(completions[0].start_position, -len(text))
                accepted = text[:len(text) + completions[0].start_position] + completions[0].text
                self.assertEqual(accepted, "Acme Corp")

    @patch('kimaipy.ui.prompts.prompt', return_value="Acme Corp")
    def test_autocomplete_select_multi_word_name(self, mock_prompt):
        """A multi-word name passes the validator and maps back to its element."""
        items = [{"id": 7, "name": "Acme Corp"}, {"id": 8, "name": "Xylo"}]

        self.assertEqual(prompts.autocomplete_select(items, "Select project"), {"id": 7, "name": "Acme Corp"})
        validator = mock_prompt.call_args[1]["validator"]
        validator.validate(Document("Acme Corp"))
        with self.assertRaises(ValidationError):
            validator.validate(Document("acme Acme Corp"))

    @patch('kimaipy.ui.prompts.prompt', return_value="Webshop")
    def test_autocomplete_select(self, mock_prompt):
        """The typed name is mapped back to its element."""
        selected = prompts.autocomplete_select(self.mock_projects, "Select project")

        self.assertEqual(selected, {"id": 3, "name": "Webshop"})
        self.assertEqual(mock_prompt.call_args[0][0], "Select project: ")

    @patch('kimaipy.ui.prompts.prompt')
    def test_autocomplete_select_empty(self, mock_prompt):
        """There is nothing to ask for without elements."""
        self.assertIsNone(prompts.autocomplete_select([], "Select activity"))
        mock_prompt.assert_not_called()

    @patch('kimaipy.ui.prompts.select_from_list', return_value=21)
    def test_select_measurement(self, mock_select):
        """Measurements are labelled by project and activity."""
        measurements = [
            {"id": 20, "project": {"id": 1, "name": "Website"}, "activity": {"id": 5, "name": "Design"}},
            {"id": 21, "project": {"id": 2, "name": "Intranet"}, "activity": {"id": 6, "name": "Support"}},
        ]

        self.assertEqual(prompts.select_measurement(measurements), 21)
        mock_select.assert_called_once_with(
            'Select measurement',
            [("Website | Design", 20), ("Intranet | Support", 21)]
        )

    def test_select_from_list_without_choices(self):
        """Only separators means there is nothing to pick."""
        self.assertIsNone(prompts.select_from_list("Select", [prompts.SEPARATOR]))

    @patch('kimaipy.ui.prompts.prompt', side_effect=[" https://kimai.example.com/ ", "susan", "token "])
    def test_ask_for_settings(self, mock_prompt):
        """The three answers are returned stripped, the token hidden."""
        self.assertEqual(prompts.ask_for_settings(), ("https://kimai.example.com/", "susan", "token"))
        self.assertTrue(mock_prompt.call_args_list[2][1]["is_password"])

if __name__ == '__main__':
    unittest.main()
