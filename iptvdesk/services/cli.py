import asyncio
import logging
from typing import Any, Dict

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.clipboard.pyperclip import PyperclipClipboard
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from iptvdesk.services.desk import DeskState

logger = logging.getLogger(__name__)

URL_TAB = "url"
CREDENTIALS_TAB = "credentials"

# What the input line edits.
URL_TARGET = "url"
USERNAME_TARGET = "username"
PASSWORD_TARGET = "password"
IMPORT_TARGET = "import"

PROMPTS: Dict[str, str] = {
    URL_TARGET: "URL: ",
    USERNAME_TARGET: "Username: ",
    PASSWORD_TARGET: "Password: ",
    IMPORT_TARGET: "Import from URL (ENTER): ",
}

IMPORT_SUCCESS = "Credentials imported"
IMPORT_ERROR = "No username or password found in that URL"


class CLIService:
    def __init__(self, state: DeskState) -> None:
        self.state: DeskState = state
        self.active_tab: str = URL_TAB
        self.input_target: str = URL_TARGET
        self.status: str = ""

        self.output_field: TextArea = TextArea(
            style="class:output",
            scrollbar=True,
            focusable=False,
            wrap_lines=True,
        )

        self.help_bar: TextArea = TextArea(
            text=(
                "TAB tab | F2 user | F3 pass | F4 import | F5 ts/m3u8 | "
                "F6 copy | ^N/^P host | ^L clear | ^C quit"
            ),
            style="class:help",
            height=1,
            focusable=False,
        )

        self.input_field: TextArea = TextArea(
            height=1,
            prompt=lambda: PROMPTS[self.input_target],
            style="class:input",
            multiline=False,
            wrap_lines=False,
            accept_handler=self.on_accept,
        )

        self.input_field.buffer.on_text_changed += self.on_text_change

        self.container: HSplit = HSplit(
            [
                self.output_field,
                self.help_bar,
                self.input_field,
            ],
            padding=0,
        )

        self.kb: KeyBindings = KeyBindings()
        self.kb.add("c-c")(self.exit_app)
        self.kb.add("tab")(self.toggle_tab)
        self.kb.add("f2")(self.edit_username)
        self.kb.add("f3")(self.edit_password)
        self.kb.add("f4")(self.edit_import)
        self.kb.add("f5")(self.toggle_output)
        self.kb.add("f6")(self.copy_result)
        self.kb.add("c-n")(self.next_host)
        self.kb.add("c-p")(self.previous_host)
        self.kb.add("c-l")(self.clear_input)

        self.application: Application[Any] = Application(
            layout=Layout(self.container),
            key_bindings=self.kb,
            clipboard=PyperclipClipboard(),
            full_screen=True,
            mouse_support=False,
            style=Style.from_dict(
                {
                    "output": "bg:#000000 #ffffff",
                    "input": "bg:#1a1a1a #ffffff",
                    "help": "bg:#333333 #aaaaaa",
                }
            ),
        )

    def exit_app(self, event: KeyPressEvent) -> None:
        event.app.exit()

    def on_text_change(self, _: Any) -> None:
        asyncio.get_event_loop().call_soon(self.apply_input)

    def apply_input(self) -> None:
        text: str = self.input_field.text
        if self.input_target == URL_TARGET:
            self.state.set_original_url(text.strip())
        elif self.input_target == USERNAME_TARGET:
            self.state.set_username(text)
        elif self.input_target == PASSWORD_TARGET:
            self.state.set_password(text)
        self.update_output()

    def on_accept(self, buffer: Buffer) -> bool:
        if self.input_target != IMPORT_TARGET:
            return True
        if self.state.import_credentials(buffer.text):
            self.status = IMPORT_SUCCESS
        else:
            self.status = IMPORT_ERROR
        logger.info(self.status)
        self.update_output()
        return False

    def set_target(self, target: str) -> None:
        values: Dict[str, str] = {
            URL_TARGET: self.state.original_url,
            USERNAME_TARGET: self.state.username,
            PASSWORD_TARGET: self.state.password,
            IMPORT_TARGET: "",
        }
        self.input_target = target
        self.input_field.text = values[target]
        self.input_field.buffer.cursor_position = len(self.input_field.text)

    def toggle_tab(self, event: KeyPressEvent) -> None:
        if self.active_tab == URL_TAB:
            self.active_tab = CREDENTIALS_TAB
            self.set_target(USERNAME_TARGET)
        else:
            self.active_tab = URL_TAB
            self.set_target(URL_TARGET)
        self.status = ""
        self.update_output()

    def _edit_credential(self, target: str) -> None:
        self.active_tab = CREDENTIALS_TAB
        self.set_target(target)
        self.status = ""
        self.update_output()

    def edit_username(self, event: KeyPressEvent) -> None:
        self._edit_credential(USERNAME_TARGET)

    def edit_password(self, event: KeyPressEvent) -> None:
        self._edit_credential(PASSWORD_TARGET)

    def edit_import(self, event: KeyPressEvent) -> None:
        self._edit_credential(IMPORT_TARGET)

    def toggle_output(self, event: KeyPressEvent) -> None:
        self.state.toggle_output()
        self.update_output()

    def copy_result(self, event: KeyPressEvent) -> None:
        if self.active_tab == URL_TAB:
            text: str = self.state.final_url
        else:
            text = self.state.selected_m3u_url
        if not text:
            self.status = "Nothing to copy"
        else:
            event.app.clipboard.set_text(text)
            self.status = "Copied to clipboard"
        self.update_output()

    def next_host(self, event: KeyPressEvent) -> None:
        self.state.next_host()
        logger.info(f"Selected host: {self.state.host}")
        self.update_output()

    def previous_host(self, event: KeyPressEvent) -> None:
        self.state.previous_host()
        logger.info(f"Selected host: {self.state.host}")
        self.update_output()

    def clear_input(self, event: KeyPressEvent) -> None:
        self.state.clear()
        if self.input_target == URL_TARGET:
            self.input_field.text = ""
        self.update_output()

    def update_output(self) -> None:
        try:
            if self.active_tab == URL_TAB:
                text: str = self.state.render_url_tab()
            else:
                text = self.state.render_credentials_tab()
        except Exception:
            logger.exception("Rendering failed")
            text = ""
        lines = [f"[{self.active_tab.upper()}]", text]
        if self.status:
            lines += ["", f"> {self.status}"]
        self.output_field.text = "\n".join(lines)

    def run(self) -> None:
        logger.info("Starting interactive CLI UI")
        self.update_output()
        with patch_stdout():
            self.application.run()
