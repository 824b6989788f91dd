from abc import ABCMeta, abstractmethod

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.shortcuts import CompleteStyle
from prompt_toolkit.filters import completion_is_selected, has_completions
from prompt_toolkit.key_binding import KeyBindings

from .charset import KINDS, KIND_NAMES
from .composer import Composer, ComposerException
from .confirm_yes_no import confirm_yes_no

class PromptCompleter(Completer):
    def __init__(self, shell):
        super().__init__()
        self.shell = shell

    def get_completions(self, document, complete_event):
        # Complete only at end of line:
        if document.cursor_position!=len(document.text):
            return

        text = document.text

        # Complete command names
        if not " " in text:
            for cmd in self.shell.commands():
                if cmd.name.startswith(text):
                    yield Completion(cmd.name, start_position=-len(text), style='fg:ansired')

        # Call command handlers if applicable
        for cmd in self.shell.commands():
            if text.startswith(cmd.name+" "):
                yield from cmd.completion_handler(text[len(cmd.name)+1:])
                return

class Command(metaclass=ABCMeta):
    is_default = False
    usage = ""

    def __init__(self, shell):
        self.shell = shell

    @abstractmethod
    def handle(self, args):
        """
        Return True to exit.
        """
        pass

    def completion_handler(self, text):
        return iter(())

    @property
    @abstractmethod
    def name(self):
        pass

    @property
    @abstractmethod
    def description(self):
        pass

    @property
    def composer(self) -> Composer:
        return self.shell.composer

    def usage_line(self) -> str:
        if self.usage:
            return f"{self.name} {self.usage}"
        return self.name

    def completion_handler_kind(self, text):
        if " " in text:
            return
        for kind in KINDS:
            if kind.startswith(text):
                yield Completion(kind, start_position=-len(text), style='fg:ansiblue')

class CmdShow(Command):
    name = "show"
    description = "Show composition, unit and current value."

    def handle(self, args):
        if len(args)>0:
            print("?")
            return
        self.shell.print_composer()

class CmdSet(Command):
    name = "set"
    usage = "<ltr|sbl|num> <count>"
    description = "Set the count of letters, symbols or numbers."
    completion_handler = Command.completion_handler_kind

    def handle(self, args):
        args_s = args.split()
        if len(args_s) != 2:
            print(f"Usage: {self.usage_line()}")
            return
        kind, count = args_s
        self.composer.set_count(kind, count)
        print(f"{KIND_NAMES[kind].capitalize()} set to {self.composer.get_count(kind)}.")

class CmdUnit(Command):
    name = "unit"
    usage = "<size>"
    description = "Set the number of characters generated per batch."

    def handle(self, args):
        if len(args)==0:
            print(f"Unit is {self.composer.unit}.")
            return
        self.composer.unit = args.strip()
        print(f"Unit set to {self.composer.unit}.")

class CmdJoin(Command):
    name = "join"
    is_default = True
    description = "Generate a new random string of the current composition."

    def handle(self, args):
        if len(args)>0:
            print("?")
            return
        print(self.composer.generate())

class CmdInfer(Command):
    name = "infer"
    usage = "<text>"
    description = "Take over the composition of an existing string."

    def handle(self, args):
        if len(args)==0:
            print(f"Usage: {self.usage_line()}")
            return
        self.composer.infer(args.strip())
        self.shell.print_composition()

class CmdData(Command):
    name = "data"
    description = "Show the characters generation draws from."

    def handle(self, args):
        if len(args)>0:
            print("?")
            return
        print(self.composer.data.describe())

class CmdDelete(Command):
    name = "del"
    usage = "<chars>"
    description = "Remove characters from the character data."

    def handle(self, args):
        if len(args)==0:
            print(f"Usage: {self.usage_line()}")
            return
        self.composer.delete(args)
        print(f"{len(set(args))} characters removed.")

class CmdReplace(Command):
    name = "replace"
    usage = "<chars>"
    description = "Replace the character data with the given characters."

    def handle(self, args):
        if len(args)==0:
            print(f"Usage: {self.usage_line()}")
            return
        self.composer.replace_data(args)
        print(self.composer.data.describe())

class CmdReset(Command):
    name = "reset"
    description = "Restore the default character data."

    def handle(self, args):
        if len(args)>0:
            print("?")
            return
        if not confirm_yes_no("Discard changes to the character data?"):
            return
        self.composer.data.reset()
        print("Character data reset.")

class CmdHelp(Command):
    name = "help"
    usage = "[command]"
    description = "List commands or describe one command."

    def completion_handler(self, text):
        for cmd in self.shell.all_commands:
            if cmd.name.startswith(text):
                yield Completion(cmd.name, start_position=-len(text))

    def handle(self, args):
        if len(args)==0:
            print("Randkey commands:")
            width = max(len(cmd.usage_line()) for cmd in self.shell.all_commands)
            for cmd in self.shell.all_commands:
                print(f"  {cmd.usage_line():<{width}}  {cmd.description}")
            return

        for cmd in self.shell.all_commands:
            if cmd.name == args:
                print(f"{cmd.name}: {cmd.description}")
                print(f"Usage: {cmd.usage_line()}")
                return
        print(f"Unknown command \"{args}\".")

class CmdExit(Command):
    name = "exit"
    description = "Leave the shell."

    def handle(self, args):
        if len(args)>0:
            print("?")
            return
        return True

class Shell:
    """
    The Shell class provides a shell-like interface for editing a Composer
    and generating strings from it.
    """

    command_classes = [
        CmdShow,
        CmdSet,
        CmdUnit,
        CmdJoin,
        CmdInfer,
        CmdData,
        CmdDelete,
        CmdReplace,
        CmdReset,
        CmdHelp,
        CmdExit,
    ]

    def __init__(self, composer: Composer):
        self.composer = composer

        self.all_commands = [cls(self) for cls in self.command_classes]

    def print_composition(self):
        c = self.composer
        print(f"{c.letters} letters, {c.symbols} symbols, {c.numbers} numbers ({c.total} total)")

    def print_composer(self):
        self.print_composition()
        print(f"unit: {self.composer.unit}")
        if self.composer.is_empty():
            print("value: (empty)")
        else:
            print(f"value: {self.composer.value}")

    def commands(self):
        yield from self.all_commands

    def default_command(self) -> Command:
        default_cmd = None
        for cmd in self.commands():
            if cmd.is_default:
                assert (not default_cmd)
                default_cmd = cmd
        return default_cmd

    def key_bindings(self):
        key_bindings = KeyBindings()

        @key_bindings.add("enter", filter=has_completions & ~completion_is_selected)
        def _(event):
            event.current_buffer.go_to_completion(0)
            event.current_buffer.complete_state = None

        @key_bindings.add("enter", filter=completion_is_selected)
        def _(event):
            event.current_buffer.complete_state = None
        return key_bindings

    def handle_cmd_named(self, text):
        text_s = text.split(" ", 1)
        cmd_name = text_s[0]
        try:
            args = text_s[1]
        except IndexError:
            args = ""

        for cmd in self.commands():
            if cmd.name == cmd_name:
                return cmd.handle(args)

        raise KeyError("Unknown command.")

    def handle_cmd(self, text):
        try:
            try:
                return self.handle_cmd_named(text)
            except KeyError:
                default_cmd = self.default_command()
                if default_cmd:
                    return default_cmd.handle(text)
                else:
                    print("?")
        except ComposerException as exc:
            print(f"Error: {exc}")

    def run(self):
        """starts interactive shell-like session."""
        running = True
        session = PromptSession(key_bindings=self.key_bindings(), complete_style=CompleteStyle.READLINE_LIKE)

        while running:
            my_completer=PromptCompleter(self)
            try:
                text = session.prompt(f'randkey[{self.composer.total}]> ', completer=my_completer, complete_while_typing=True)
            except (EOFError, KeyboardInterrupt):
                # Exit on Ctrl+C or Ctrl+D.
                text = "exit"
            if self.handle_cmd(text.strip()):
                running=False
