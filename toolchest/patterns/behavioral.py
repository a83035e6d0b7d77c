"""Behavioural design patterns: chain of responsibility, command,
interpreter, iterator, mediator, memento and observer."""

from __future__ import annotations

import itertools
import random
import string
import sys
import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, TextIO


def _write(out: Optional[TextIO], text: str) -> None:
    (out if out is not None else sys.stdout).write(text)


# ------------------------------------------------- chain of responsibility


class Handler(ABC):
    """One password rule; passes the password on to the next rule."""

    def __init__(
        self, next_handler: Optional[Handler] = None, out: Optional[TextIO] = None
    ) -> None:
        self.next = next_handler
        self._out = out

    def set_next(self, handler: Handler) -> Handler:
        """Attach the following rule and return it, so calls can be chained."""
        self.next = handler
        return handler

    @abstractmethod
    def _evaluate(self, password: str) -> tuple[bool, str]:
        """Return whether the rule holds and the message shown on failure."""

    def check(self, password: str) -> bool:
        passed, failure = self._evaluate(password)
        if not passed:
            _write(self._out, failure)
            _write(self._out, f"{password} is rejected.\n\n")
            return False
        if self.next is None:
            _write(self._out, f"Password {password} is accepted.\n\n")
            return True
        return self.next.check(password)


class LengthChecker(Handler):
    def __init__(
        self,
        min_length: int = 8,
        max_length: int = 16,
        next_handler: Optional[Handler] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(next_handler, out)
        self.min_length = min_length
        self.max_length = max_length

    def _evaluate(self, password: str) -> tuple[bool, str]:
        passed = self.min_length <= len(password) <= self.max_length
        return passed, (
            f"Password length must lie between {self.min_length} & {self.max_length}.\n"
        )


class NumberChecker(Handler):
    def __init__(
        self,
        min_digits: int = 1,
        next_handler: Optional[Handler] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(next_handler, out)
        self.min_digits = min_digits

    def _evaluate(self, password: str) -> tuple[bool, str]:
        digits = sum(ch in string.digits for ch in password)
        return digits >= self.min_digits, (
            f"Password must atleast contain {self.min_digits} digit(s).\n"
        )


class SpecialCharChecker(Handler):
    _ALNUM = frozenset(string.ascii_letters + string.digits)

    def __init__(
        self,
        min_special: int = 1,
        next_handler: Optional[Handler] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(next_handler, out)
        self.min_special = min_special

    def _evaluate(self, password: str) -> tuple[bool, str]:
        special = sum(ch not in self._ALNUM for ch in password)
        return special >= self.min_special, (
            f"Password must atleast contain {self.min_special} spl char(s).\n"
        )


class AlphaChecker(Handler):
    def __init__(
        self,
        min_lower: int = 1,
        min_upper: int = 1,
        next_handler: Optional[Handler] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(next_handler, out)
        self.min_lower = min_lower
        self.min_upper = min_upper

    def _evaluate(self, password: str) -> tuple[bool, str]:
        upper = sum(ch in string.ascii_uppercase for ch in password)
        lower = sum(ch in string.ascii_lowercase for ch in password)
        passed = upper >= self.min_upper and lower >= self.min_lower
        return passed, (
            f"Password must atleast contain {self.min_upper} upper & "
            f"{self.min_lower} lower chars.\n"
        )


def build_password_chain(out: Optional[TextIO] = None) -> Handler:
    """Length, then letters, then digits, then special characters."""
    head = LengthChecker(out=out)
    head.set_next(AlphaChecker(out=out)).set_next(NumberChecker(out=out)).set_next(
        SpecialCharChecker(out=out)
    )
    return head


# ------------------------------------------------------------------ command


class Command(ABC):
    def __init__(self, value: float) -> None:
        self.value = value

    @abstractmethod
    def execute(self, state: float) -> float:
        """Apply the command to a state."""

    @abstractmethod
    def undo(self, state: float) -> float:
        """Reverse the command on a state."""


class AddCommand(Command):
    def execute(self, state: float) -> float:
        return state + self.value

    def undo(self, state: float) -> float:
        return state - self.value


class SubCommand(Command):
    def execute(self, state: float) -> float:
        return state - self.value

    def undo(self, state: float) -> float:
        return state + self.value


class MulCommand(Command):
    def execute(self, state: float) -> float:
        return state * self.value

    def undo(self, state: float) -> float:
        if self.value == 0:
            raise ZeroDivisionError("Div by Zero.")
        return state / self.value


class DivCommand(Command):
    def execute(self, state: float) -> float:
        if self.value == 0:
            raise ZeroDivisionError("Div by Zero.")
        return state / self.value

    def undo(self, state: float) -> float:
        return state * self.value


class Calculator:
    """Applies commands to a running value and can undo them in turn."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.state = 0.0
        self._history: list[Command] = []
        self._out = out

    def execute(self, command: Command) -> float:
        self.state = command.execute(self.state)
        self._history.append(command)
        _write(self._out, f"{self.state:g}\n")
        return self.state

    def undo(self) -> float:
        if not self._history:
            _write(self._out, "Nothing to undo.\n")
            return self.state
        command = self._history[-1]
        self.state = command.undo(self.state)
        self._history.pop()
        _write(self._out, f"{self.state:g}\n")
        return self.state


# -------------------------------------------------------------- interpreter


class Expression(ABC):
    @abstractmethod
    def interpret(self) -> int:
        """Evaluate the expression."""


@dataclass(frozen=True)
class Number(Expression):
    value: int

    def interpret(self) -> int:
        return self.value


@dataclass(frozen=True)
class AddExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


@dataclass(frozen=True)
class SubExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


# ----------------------------------------------------------------- iterator


@dataclass
class TreeNode:
    data: object
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @classmethod
    def from_level_order(cls, values: list, null: object) -> Optional[TreeNode]:
        """Build a tree from level-order values, ``null`` marking gaps."""
        nodes: list[TreeNode] = []
        parent = 0
        for position, value in enumerate(values):
            node = cls(value) if value != null else None
            if node is not None:
                nodes.append(node)
            if position == 0:
                continue
            if parent >= len(nodes):
                raise ValueError("level order gives children to a missing node")
            if position % 2:
                nodes[parent].left = node
            else:
                nodes[parent].right = node
                parent += 1
        return nodes[0] if nodes else None


def dfs(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Pre-order, depth-first traversal."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
        yield node


def bfs(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Level-order, breadth-first traversal."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
        yield node


# ----------------------------------------------------------------- mediator


class Participant:
    """A chat user; messages travel only through its chatroom."""

    def __init__(self, name: str, out: Optional[TextIO] = None) -> None:
        self.name = name
        self.chatroom: Optional[Chatroom] = None
        self.inbox: list[tuple[str, str]] = []
        self._out = out

    def send(self, message: str, to: Optional[Participant] = None) -> None:
        """Send to one participant, or to the whole room when ``to`` is None."""
        if self.chatroom is None:
            raise RuntimeError(f"{self.name} is not in a chatroom.")
        self.chatroom.send(message, self, to)

    def receive(self, message: str, sender: Participant) -> str:
        line = f"{sender.name} -> {self.name}: {message}"
        self.inbox.append((sender.name, message))
        _write(self._out, line + "\n")
        return line


class Chatroom:
    def __init__(self) -> None:
        self._users: dict[str, Participant] = {}

    def register(self, participant: Participant) -> None:
        self._users[participant.name] = participant
        participant.chatroom = self

    def send(
        self, message: str, sender: Participant, to: Optional[Participant] = None
    ) -> None:
        if to is None:
            for user in list(self._users.values()):
                user.receive(message, sender)
            return
        target = self._users.get(to.name)
        if target is None:
            raise KeyError("User doesn't exist in this chatroom.")
        target.receive(message, sender)


# ------------------------------------------------------------------ memento


@dataclass(frozen=True)
class Memento:
    state: str
    date: str = field(default_factory=time.ctime)

    @property
    def name(self) -> str:
        return f"{self.date} / ({self.state[:9]}...)"


class Editor:
    """Holds text that can be saved to and restored from mementos."""

    CHARS: ClassVar[str] = string.ascii_lowercase + string.ascii_uppercase + string.digits

    def __init__(
        self, rng: Optional[random.Random] = None, out: Optional[TextIO] = None
    ) -> None:
        self.text = ""
        self._rng = rng if rng is not None else random.Random()
        self._out = out
        self.display()

    def display(self) -> None:
        _write(self._out, f"\nEditor: {self.text}\n")

    def save(self) -> Memento:
        return Memento(self.text)

    def restore(self, memento: Memento) -> None:
        self.text = memento.state
        self.display()

    def update_text(self, length: int = 30) -> str:
        self.text = "".join(self._rng.choice(self.CHARS) for _ in range(length))
        self.display()
        return self.text


class CareTaker:
    """Keeps a stack of an editor's snapshots."""

    def __init__(self, editor: Editor, out: Optional[TextIO] = None) -> None:
        self.editor = editor
        self._snapshots: list[Memento] = []
        self._out = out

    def backup(self) -> Memento:
        _write(self._out, "\nSaving backup...\n")
        memento = self.editor.save()
        self._snapshots.append(memento)
        return memento

    def undo(self) -> Optional[Memento]:
        """Restore the latest snapshot and return it; None when there is none."""
        if not self._snapshots:
            _write(self._out, "\nNothing to undo.\n")
            return None
        snapshot = self._snapshots.pop()
        _write(self._out, f"\nRestoring state to {snapshot.name}\n")
        self.editor.restore(snapshot)
        return snapshot

    def history(self) -> list[str]:
        lines = [
            f"Version #{version}: {memento.name}"
            for version, memento in enumerate(self._snapshots)
        ]
        _write(self._out, "\nListing all version snapshots.\n")
        for line in lines:
            _write(self._out, line + "\n")
        return lines


# ----------------------------------------------------------------- observer


class Listener(ABC):
    """A subscriber with a unique, increasing id."""

    _ids: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.id = next(Listener._ids)
        self._out = out

    @abstractmethod
    def _describe(self, message: str) -> str:
        """The notification line for a message."""

    def update(self, message: str) -> str:
        line = self._describe(message)
        _write(self._out, line + "\n")
        return line


class EmailListener(Listener):
    def __init__(self, email: str, out: Optional[TextIO] = None) -> None:
        super().__init__(out)
        self.email = email

    def _describe(self, message: str) -> str:
        return f"*** Sending email notification to {self.email}: {message} ***"


class SMSListener(Listener):
    def __init__(self, mobile: str, out: Optional[TextIO] = None) -> None:
        super().__init__(out)
        self.mobile = mobile

    def _describe(self, message: str) -> str:
        return f"*** Sending SMS notification to {self.mobile}: {message} ***"


class NotificationService:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._subscribers: dict[int, Listener] = {}
        self._out = out

    def subscribe(self, listener: Listener) -> int:
        _write(self._out, f"ID #{listener.id} is now subscribed.\n")
        self._subscribers[listener.id] = listener
        return listener.id

    def unsubscribe(self, listener_id: int) -> None:
        if listener_id not in self._subscribers:
            raise KeyError("User not subscribed.")
        _write(self._out, f"ID #{listener_id} is now unsubscribed.\n")
        del self._subscribers[listener_id]

    def notify(self, message: str) -> list[str]:
        return [listener.update(message) for listener in self._subscribers.values()]


class Store:
    def __init__(self, service: Optional[NotificationService] = None) -> None:
        self.service = service

    def update(self, message: str) -> list[str]:
        if self.service is None:
            raise RuntimeError("No Notification service available.")
        return self.service.notify(message)