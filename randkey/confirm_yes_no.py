import asyncio
import sys

from prompt_toolkit.input import create_input
from prompt_toolkit.keys import Keys

YES_KEYS = ('y', 'Y')
NO_KEYS = ('n', 'N', Keys.Escape, Keys.ControlC)

class Confirmer:
    """
    Waits for a single y/n key press in raw mode. Enter selects the default
    answer, all other keys are ignored.
    """

    def __init__(self, question: str, default: bool):
        self.question = question
        self.default = default
        self.answer = None

    def prompt_text(self) -> str:
        choices = "Y/n" if self.default else "y/N"
        return f"{self.question} ({choices})"

    def keys_ready(self):
        for key_press in self.input.read_keys():
            if key_press.key in YES_KEYS:
                self.answer = True
            elif key_press.key in NO_KEYS:
                self.answer = False
            elif key_press.key in (Keys.Enter, Keys.ControlM):
                self.answer = self.default
            else:
                continue
            print('y' if self.answer else 'n')
            self.done.set()
            return

    async def async_main(self) -> bool:
        self.done = asyncio.Event()
        self.input = create_input()
        sys.stdout.write(self.prompt_text()+' ')
        sys.stdout.flush()
        with self.input.raw_mode():
            with self.input.attach(self.keys_ready):
                await self.done.wait()
        return self.answer

def confirm_yes_no(question: str, default: bool = False) -> bool:
    return asyncio.run(Confirmer(question, default).async_main())
