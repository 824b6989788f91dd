import threading
import sys

class BusySpinner:
    """
    Shows a rotating spinner on a stream while a long generation runs.
    Writes to stderr by default, so the generated string on stdout stays
    clean.
    """

    def __init__(self, label: str = "", stream=None):
        self.label = label
        self.stream = stream if stream is not None else sys.stderr
        self.event = None
        self.thread = None

    def print_spinner(self):
        delay=0.1
        prefix = f"{self.label} " if self.label else ""
        while True:
            for x in ['-', '\\', '|', '/']:
                self.stream.write(f"\r{prefix}{x}")
                self.stream.flush()
                if self.event.wait(timeout=delay):
                    blank = " " * (len(prefix) + 1)
                    self.stream.write(f"\r{blank}\r")
                    self.stream.flush()
                    return

    def start(self):
        assert not self.event
        self.event = threading.Event()
        self.thread = threading.Thread(target=self.print_spinner, daemon=True)
        self.thread.start()

    def end(self):
        if self.event:
            self.event.set()
            self.thread.join()
        self.event = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end()
