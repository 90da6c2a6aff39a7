import logging
import sys
from logging.handlers import RotatingFileHandler

from userprompt.data_types import Submission, str_submission
from userprompt.states import PromptState
from userprompt.utils import PromptSession
from userprompt.validation import is_exit, valid_age, valid_city, valid_name

logger = logging.getLogger("userprompt.app")

LOG_FILE = "/tmp/userprompt.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

BANNER_RULE = "================================="
BANNER_TITLE = "Simple User Input Node.js App"

NAME_PROMPT = 'Enter your name (or type "exit" to quit): '
AGE_PROMPT = "Enter your age: "
CITY_PROMPT = "Enter your city: "

INVALID_NAME = "Please enter a valid name."
INVALID_AGE = "Please enter a valid age."
INVALID_CITY = "Please enter a valid city."
GOODBYE = "Thank you for using this application. Goodbye!"


class PromptLoop:
    def __init__(self, session=None, logs=False):
        setup_logger(logs=logs)
        self.session = session or PromptSession()
        self.state = PromptState.awaiting_name
        self.submission = Submission()

    def print_banner(self):
        self.session.write(BANNER_RULE)
        self.session.write(BANNER_TITLE)
        self.session.write(BANNER_RULE)
        self.session.write()

    def restart(self, message):
        self.session.write(message)
        self.session.write()
        self.submission = Submission()
        return PromptState.awaiting_name

    def ask_name(self):
        name = self.session.question(NAME_PROMPT)
        if is_exit(name):
            self.session.write()
            self.session.write(GOODBYE)
            return PromptState.done
        if not valid_name(name):
            return self.restart(INVALID_NAME)
        self.submission.name = name
        return PromptState.awaiting_age

    def ask_age(self):
        age = self.session.question(AGE_PROMPT)
        if not valid_age(age):
            logger.debug(f"PromptLoop.ask_age - rejected {age=}")
            return self.restart(INVALID_AGE)
        self.submission.age = age
        return PromptState.awaiting_city

    def ask_city(self):
        city = self.session.question(CITY_PROMPT)
        if not valid_city(city):
            return self.restart(INVALID_CITY)
        self.submission.city = city
        logger.debug(f"PromptLoop.ask_city - {self.submission=}")
        self.session.write(str_submission(self.submission))
        self.submission = Submission()
        return PromptState.awaiting_name

    def step(self):
        handlers = {
            PromptState.awaiting_name: self.ask_name,
            PromptState.awaiting_age: self.ask_age,
            PromptState.awaiting_city: self.ask_city,
        }
        next_state = handlers[self.state]()
        logger.debug(f"PromptLoop.step - {self.state.name} -> {next_state.name}")
        self.state = next_state

    def run(self):
        with self.session:
            self.print_banner()
            while not self.state.is_terminal:
                try:
                    self.step()
                except (EOFError, KeyboardInterrupt) as e:
                    logger.info(f"Input closed: {type(e).__name__}")
                    self.state = PromptState.done
                except Exception as e:
                    logger.exception(f"PromptLoop.run: {e}")
                    raise e
        logger.info("Session ended")
        return 0


def run():
    sys.exit(PromptLoop().run())


def run_debug():
    sys.exit(PromptLoop(logs=True).run())


def setup_logger(logs=False):
    logger = logging.getLogger("userprompt")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        handler = RotatingFileHandler(
            LOG_FILE,
            mode="a",
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding=None,
            delay=True,
        )
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if logs and not any(
        type(h) is logging.StreamHandler and h.stream is sys.stdout
        for h in logger.handlers
    ):
        console_handler = logging.StreamHandler(sys.stdout)
        console_formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    logger.info("**************** NEW SESSION STARTED ****************")

    return logger


if __name__ == "__main__":
    run()
