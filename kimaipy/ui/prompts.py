"""Interactive prompts: list picker, fuzzy autocomplete picker and settings questions."""
from typing import Any, Dict, List, Optional, Sequence, Tuple

from prompt_toolkit import prompt
from prompt_toolkit.application import Application, get_app
from prompt_toolkit.completion import CompleteEvent, FuzzyCompleter, WordCompleter
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.validation import Validator

from ..reports.measurement import Measurement

# A choice is (label, value); None is drawn as a separator line
Choice = Optional[Tuple[str, Any]]

SEPARATOR = None

STYLE = Style.from_dict({
    'pointer': 'bold cyan',
    'item': '',
    'separator': '#64748b',
    'instruction': 'italic #64748b',
    'title': 'bold',
})

def select_from_list(message: str, choices: Sequence[Choice]) -> Any:
    """Let the user pick one entry with the arrow keys.

    Args:
        message: Title shown above the list
        choices: (label, value) pairs; SEPARATOR entries cannot be selected

    Returns:
        Value of the chosen entry, or None if the user cancelled
    """
    selectable = [i for i, c in enumerate(choices) if c is not SEPARATOR]
    if not selectable:
        return None
    state = {'pos': 0}

    def body_text():
        lines = []
        current = selectable[state['pos']]
        for idx, choice in enumerate(choices):
            if choice is SEPARATOR:
                lines.append(('class:separator', '  ──────────────\n'))
            elif idx == current:
                lines.append(('class:pointer', f"❯ {choice[0]}\n"))
            else:
                lines.append(('class:item', f"  {choice[0]}\n"))
        return lines

    kb = KeyBindings()

    @kb.add('up')
    @kb.add('k')
    def _(event):
        state['pos'] = (state['pos'] - 1) % len(selectable)
        event.app.invalidate()

    @kb.add('down')
    @kb.add('j')
    def _(event):
        state['pos'] = (state['pos'] + 1) % len(selectable)
        event.app.invalidate()

    @kb.add('enter')
    def _(event):
        event.app.exit(result=choices[selectable[state['pos']]][1])

    @kb.add('escape')
    @kb.add('c-c')
    def _(event):
        event.app.exit(result=None)

    layout = Layout(HSplit([
        Window(height=1, content=FormattedTextControl(lambda: [('class:title', message)]),
               always_hide_cursor=True),
        Window(content=FormattedTextControl(body_text), always_hide_cursor=True),
        Window(height=1, content=FormattedTextControl(
            lambda: [('class:instruction', 'Use ↑/↓ to choose, Enter to confirm, Esc to cancel.')]),
            always_hide_cursor=True),
    ]))
    app = Application(layout=layout, key_bindings=kb, style=STYLE, full_screen=False)
    return app.run()

def select_measurement(measurements: List[Dict[str, Any]]) -> Any:
    """Let the user pick a measurement, labelled 'Project | Activity'.

    Args:
        measurements: Measurements as returned by the API

    Returns:
        Id of the chosen measurement, or None if cancelled or the list is empty
    """
    choices = [(Measurement(m).label, m['id']) for m in measurements]
    return select_from_list('Select measurement', choices)

def name_completer(names: Sequence[str]) -> FuzzyCompleter:
    """Get a completer matching the whole input against names.

    Spaces are part of the search text, and an accepted completion replaces
    everything typed so far.

    Args:
        names: Candidate names

    Returns:
        Fuzzy completer over the names
    """
    return FuzzyCompleter(WordCompleter(list(names), sentence=True), pattern=r"^.*")

def fuzzy_filter(text: str, names: Sequence[str]) -> List[str]:
    """Filter names by fuzzy matching (characters of text in order, any case).

    Args:
        text: What the user typed so far
        names: Candidate names

    Returns:
        Matching names, best matches first
    """
    completer = name_completer(names)
    document = Document(text, len(text))
    return [c.text for c in completer.get_completions(document, CompleteEvent())]

def autocomplete_select(items: List[Dict[str, Any]], message: str) -> Optional[Dict[str, Any]]:
    """Let the user pick an element by typing part of its name.

    The completion menu is filtered again on every keystroke.

    Args:
        items: Elements with 'id' and 'name'
        message: Prompt message

    Returns:
        {'id', 'name'} of the chosen element, or None if there was nothing to choose
    """
    if not items:
        return None
    names = [str(item.get('name', '')) for item in items]
    validator = Validator.from_callable(
        lambda text: text in names,
        error_message='Choose an entry from the list',
        move_cursor_to_end=True,
    )

    def open_menu():
        get_app().current_buffer.start_completion(select_first=False)

    answer = prompt(
        f"{message}: ",
        completer=name_completer(names),
        complete_while_typing=True,
        validator=validator,
        validate_while_typing=False,
        pre_run=open_menu,
    )
    item = items[names.index(answer)]
    return {'id': item.get('id'), 'name': item.get('name')}

def ask_for_settings() -> Tuple[str, str, str]:
    """Ask for the server connection settings.

    Returns:
        Tuple of (server URL, username, API token)
    """
    url = prompt('Kimai2 url: ').strip()
    username = prompt('Username: ').strip()
    api_token = prompt('API password: ', is_password=True).strip()
    return url, username, api_token
