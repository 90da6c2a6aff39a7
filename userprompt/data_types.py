from dataclasses import dataclass, fields

SUMMARY_HEADER = "--- User Information ---"
SUMMARY_FOOTER = "------------------------"


@dataclass
class Submission:
    name: str = ""
    age: str = ""
    city: str = ""


def str_submission(submission: Submission) -> str:
    """
    Render a submission as the summary block shown after a complete cycle.

    Values are shown exactly as they were typed, surrounding whitespace
    included. The block is framed by blank lines.
    """
    lines = ["", SUMMARY_HEADER]
    for field in fields(submission):
        lines.append(f"{field.name.capitalize()}: {getattr(submission, field.name)}")
    lines.append(SUMMARY_FOOTER)
    lines.append("")
    return "\n".join(lines)
