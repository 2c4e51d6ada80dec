"""
Terminal picker for reviewing a batch of passwords and choosing what to copy.

Shows every password of the batch with the current one highlighted; Enter
selects it, "a" selects the whole batch.
"""

from typing import Callable, List, Optional

from prompt_toolkit import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output


class ReviewApp:
    """Minimal list interface over one batch of passwords."""

    def __init__(self, passwords: List[str], on_select: Callable[[List[str]], None],
                 hint: str = "", input: Optional[Input] = None, output: Optional[Output] = None):
        """
        Initialize the review picker.

        Args:
            passwords: Batch to review
            on_select: Called with the selected passwords (one, or the whole batch)
            hint: Extra text for the status line, e.g. the strength estimate
            input: prompt_toolkit input, terminal by default
            output: prompt_toolkit output, terminal by default
        """
        self.passwords = passwords
        self.on_select = on_select
        self.hint = hint
        self.selected_index = 0

        self.bindings = self._create_key_bindings()
        self.layout = self._create_layout()

        self.app = Application(
            layout=self.layout,
            key_bindings=self.bindings,
            full_screen=False,
            mouse_support=False,
            input=input,
            output=output,
        )

    def move(self, step: int) -> None:
        """Move the highlight, wrapping around at both ends."""
        if self.passwords:
            self.selected_index = (self.selected_index + step) % len(self.passwords)

    def select_current(self) -> None:
        """Hand the highlighted password to the callback."""
        if 0 <= self.selected_index < len(self.passwords):
            self.on_select([self.passwords[self.selected_index]])

    def select_all(self) -> None:
        """Hand the whole batch to the callback."""
        if self.passwords:
            self.on_select(list(self.passwords))

    def _create_key_bindings(self) -> KeyBindings:
        """Create key bindings for the interface."""
        bindings = KeyBindings()

        @bindings.add('c-c')
        @bindings.add('escape')
        def _(event):
            """Quit without selection."""
            event.app.exit()

        @bindings.add('enter')
        def _(event):
            """Select highlighted password and exit."""
            self.select_current()
            event.app.exit()

        @bindings.add('a')
        def _(event):
            """Select all passwords and exit."""
            self.select_all()
            event.app.exit()

        @bindings.add('down')
        @bindings.add('tab')
        def _(event):
            self.move(1)

        @bindings.add('up')
        @bindings.add('s-tab')
        def _(event):
            self.move(-1)

        return bindings

    def _create_layout(self) -> Layout:
        """Create the application layout."""
        list_window = Window(
            content=FormattedTextControl(
                text=self._get_list_text,
                focusable=True,
                show_cursor=False
            ),
            height=len(self.passwords) or 1,
            wrap_lines=False
        )

        status_window = Window(
            content=FormattedTextControl(text=self._get_status_text, focusable=False),
            height=1,
            style="class:status"
        )

        root_container = HSplit([
            Window(
                content=FormattedTextControl(text="🔐 Generated passwords"),
                height=1,
                style="class:title"
            ),
            list_window,
            status_window,
        ])

        return Layout(root_container, focused_element=list_window)

    def _get_list_text(self) -> FormattedText:
        """Get formatted text for the password list."""
        if not self.passwords:
            return FormattedText([("class:no-results", "Nothing generated\n")])

        lines = []
        width = len(str(len(self.passwords)))
        for i, password in enumerate(self.passwords):
            if i == self.selected_index:
                prefix = "❯ "
                style = "class:selected"
            else:
                prefix = "  "
                style = "class:result"
            lines.append((style, f"{prefix}{i + 1:>{width}}. {password}\n"))

        return FormattedText(lines)

    def _get_status_text(self) -> FormattedText:
        """Get formatted text for status line."""
        position = f"[{self.selected_index + 1}/{len(self.passwords)}]" if self.passwords else "[0/0]"
        instructions = " • ↑/↓: move • Enter: copy • a: copy all • Esc: cancel"
        parts = [("class:position", position), ("class:instructions", instructions)]
        if self.hint:
            parts.append(("class:hint", f" • {self.hint}"))
        return FormattedText(parts)

    def run(self) -> None:
        """Run the picker until a selection is made or it is cancelled."""
        self.app.run()


def review_passwords(passwords: List[str], on_select: Callable[[List[str]], None], hint: str = "") -> None:
    """
    Show the review picker for a batch.

    Args:
        passwords: Batch to review
        on_select: Callback receiving the selected passwords
        hint: Extra status-line text
    """
    if not passwords:
        print("No passwords to review")
        return

    app = ReviewApp(passwords, on_select, hint=hint)
    app.run()
