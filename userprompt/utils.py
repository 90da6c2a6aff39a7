import logging
import sys

logger = logging.getLogger(__name__)


class SessionClosed(EOFError):
    """Raised when a question is asked after the session has been closed."""


def render_text(text="", stream=None):
    """Function to write one line of text to the terminal."""
    stream = stream or sys.stdout
    stream.write(f"{text}\n")
    stream.flush()


def prompt_user_input(text):
    return input(text)


class PromptSession:
    """
    Line-oriented question/answer session over one input and one output stream.

    With no streams given the session is bound to the process terminal and
    reads through ``input()``. The session is opened once and closed when the
    loop is done; use it as a context manager so it is released on every exit
    path.
    """

    def __init__(self, input_stream=None, output_stream=None):
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def write(self, text=""):
        render_text(text, stream=self.output_stream)

    def question(self, text):
        if self.closed:
            raise SessionClosed("prompt session is closed")
        try:
            if self.input_stream is None:
                answer = prompt_user_input(text)
            else:
                answer = self._read_line(text)
        except EOFError:
            logger.debug("PromptSession.question - end of input")
            self.close()
            raise
        return answer

    def _read_line(self, text):
        output_stream = self.output_stream or sys.stdout
        output_stream.write(text)
        output_stream.flush()
        line = self.input_stream.readline()
        if line == "":
            raise EOFError
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def close(self):
        if not self.closed:
            logger.debug("PromptSession.close")
        self.closed = True
