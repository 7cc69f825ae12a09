from enum import Enum
from typing import Callable, FrozenSet, Generic, List, Optional, Tuple, TypeVar

from .prompter import Choices, Prompter
from .validators import Validator
from .log import logger

R = TypeVar("R")


class FieldCollector:
    """Collects one value at a time.

    In defaulted mode the default is returned and the prompter is never
    touched. In interactive mode ``text`` keeps asking until the validator
    accepts the answer.
    """

    def __init__(self, prompter:Optional[Prompter], interactive:bool = True):
        if interactive and prompter is None:
            raise ValueError("An interactive collector needs a prompter")
        self.prompter = prompter
        self.interactive = interactive

    def text(self, message:str, default:str = "", validator:Optional[Validator] = None) -> str:
        if not self.interactive:
            return default
        while True:
            value = self.prompter.text(message, default=default)
            reason = validator(value) if validator is not None else None
            if reason is None:
                return value
            logger.debug(f"Rejected answer for '{message}': {reason}")
            self.prompter.reject(reason)

    def confirm(self, message:str, default:bool = False) -> bool:
        if not self.interactive:
            return default
        return self.prompter.confirm(message, default=default)

    def choice(self, message:str, choices:Choices, default:Optional[str] = None) -> str:
        if not self.interactive:
            return default if default is not None else choices[0][0]
        return self.prompter.choice(message, choices, default=default)


class SectionState(str, Enum):
    ASK_WHETHER_TO_ADD_SECTION = "ask_whether_to_add_section"
    COLLECT_ONE_RECORD = "collect_one_record"
    ASK_ADD_ANOTHER = "ask_add_another"
    DONE = "done"


# receives the keys collected so far, returns the record and its key
RecordCallback = Callable[[FieldCollector, FrozenSet[str]], Tuple[R, str]]


class RepeatingSection(Generic[R]):
    """Drives "zero or more records" questions.

    ASK_WHETHER_TO_ADD_SECTION -> DONE, or
    ASK_WHETHER_TO_ADD_SECTION -> COLLECT_ONE_RECORD -> ASK_ADD_ANOTHER -> ...

    A section without a gate message starts at COLLECT_ONE_RECORD. The record
    callback gets the frozen set of keys accumulated so far, so uniqueness
    checks never depend on shared state.
    """

    def __init__(
        self,
        collect_record:RecordCallback,
        another_message:str,
        gate_message:Optional[str] = None,
        gate_default:bool = False,
        another_default:bool = False,
    ):
        self.collect_record = collect_record
        self.another_message = another_message
        self.gate_message = gate_message
        self.gate_default = gate_default
        self.another_default = another_default

    def collect(self, fields:FieldCollector, seen:FrozenSet[str] = frozenset()) -> Tuple[List[R], FrozenSet[str]]:
        records:List[R] = []
        if not fields.interactive:
            return records, seen

        state = SectionState.ASK_WHETHER_TO_ADD_SECTION
        while state != SectionState.DONE:
            match state:
                case SectionState.ASK_WHETHER_TO_ADD_SECTION:
                    if self.gate_message is None or fields.confirm(self.gate_message, default=self.gate_default):
                        state = SectionState.COLLECT_ONE_RECORD
                    else:
                        state = SectionState.DONE
                case SectionState.COLLECT_ONE_RECORD:
                    record, key = self.collect_record(fields, seen)
                    records.append(record)
                    seen = seen | {key}
                    state = SectionState.ASK_ADD_ANOTHER
                case SectionState.ASK_ADD_ANOTHER:
                    if fields.confirm(self.another_message, default=self.another_default):
                        state = SectionState.COLLECT_ONE_RECORD
                    else:
                        state = SectionState.DONE
        return records, seen
