from enum import Enum


class PromptState(Enum):
    awaiting_name = "name"
    awaiting_age = "age"
    awaiting_city = "city"
    done = "done"

    @property
    def is_terminal(self):
        return self is PromptState.done
