"""Behavioural design patterns: state, strategy, template method and visitor."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, ClassVar, Iterable, Optional, TextIO


def _write(out: Optional[TextIO], text: str) -> None:
    (out if out is not None else sys.stdout).write(text)


# -------------------------------------------------------------------- state


class State(ABC):
    name: ClassVar[str]

    @abstractmethod
    def publish(self, document: Document) -> str:
        """Move the document on and return the message describing it."""


class Draft(State):
    name = "Draft"

    def publish(self, document: Document) -> str:
        document.transition(Review())
        return "Document state transitioned to 'Review'\n\n"


class Review(State):
    name = "Review"

    def publish(self, document: Document) -> str:
        document.transition(Published())
        return "Document state transitioned to 'Published'\n\n"


class Published(State):
    name = "Published"

    def publish(self, document: Document) -> str:
        return "Already published.\n"


class Document:
    """Text that moves from draft to review to published."""

    def __init__(self, text: str, out: Optional[TextIO] = None) -> None:
        self.text = text
        self.state: State = Draft()
        self._out = out

    def render(self) -> str:
        line = f"({self.state.name}): {self.text}\n\n"
        _write(self._out, line)
        return line

    def publish(self) -> str:
        _write(self._out, "Publishing document...\n")
        message = self.state.publish(self)
        _write(self._out, message)
        return message

    def transition(self, state: State) -> None:
        self.state = state


# ----------------------------------------------------------------- strategy


class PaymentStrategy(ABC):
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    @abstractmethod
    def validate(self) -> bool:
        """Whether the payment details are usable."""

    @abstractmethod
    def _receipt(self, total: float) -> str:
        """The message for a successful payment."""

    @abstractmethod
    def _rejection(self) -> str:
        """The message for invalid details."""

    def pay(self, total: float) -> str:
        message = self._receipt(total) if self.validate() else self._rejection()
        _write(self._out, message + "\n")
        return message


class CardPaymentStrategy(PaymentStrategy):
    def __init__(
        self,
        card_no: int,
        expiry_year: int,
        today: Callable[[], date] = date.today,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(out)
        self.card_no = card_no
        self.expiry_year = expiry_year
        self._today = today

    def validate(self) -> bool:
        if self.card_no <= 0:
            return False
        sixteen_digits = math.ceil(math.log10(self.card_no)) == 16
        return sixteen_digits and self.expiry_year >= self._today().year

    def _receipt(self, total: float) -> str:
        masked = str(self.card_no)[:5] + "*" * 11
        return f"Payment of amount Rs.{total:g} processed via Card# {masked}."

    def _rejection(self) -> str:
        return "Invalid card details entered."


class UPIPaymentStrategy(PaymentStrategy):
    def __init__(self, upi_id: str, out: Optional[TextIO] = None) -> None:
        super().__init__(out)
        self.upi_id = upi_id

    def validate(self) -> bool:
        return self.upi_id.count("@") == 1

    def _receipt(self, total: float) -> str:
        masked = self.upi_id[:5] + "*" * max(0, len(self.upi_id) - 5)
        return f"Payment of amount Rs.{total:g} processed via UPI# {masked}."

    def _rejection(self) -> str:
        return "UPI details is not valid."


class PaymentService:
    def __init__(self, price: float, strategy: Optional[PaymentStrategy] = None) -> None:
        self.price = price
        self.strategy = strategy

    def process_order(self) -> str:
        if self.strategy is None:
            raise RuntimeError("No payment method selected.")
        return self.strategy.pay(self.price)


# ---------------------------------------------------------- template method


class DataMiner(ABC):
    """Mining runs the same steps; only extraction differs per format."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    @abstractmethod
    def extract_file(self) -> str:
        """Describe the format-specific extraction step."""

    def parse_data(self) -> str:
        return "Parsing extracted data.."

    def analyse_data(self) -> str:
        return "Analysing parsed data contents.."

    def send_report(self) -> str:
        return "Sending analysed data report.."

    def mine(self) -> list[str]:
        steps = [self.extract_file(), self.parse_data(), self.analyse_data(), self.send_report()]
        for step in steps:
            _write(self._out, step + "\n")
        return steps


class PDFDataMiner(DataMiner):
    def extract_file(self) -> str:
        return "Extracting PDF data.."


class CSVDataMiner(DataMiner):
    def extract_file(self) -> str:
        return "Extracting CSV data.."


class DOCDataMiner(DataMiner):
    def extract_file(self) -> str:
        return "Extracting DOC data.."


# ------------------------------------------------------------------ visitor


class Client(ABC):
    def __init__(self, name: str, address: str) -> None:
        self.name = name
        self.address = address

    @abstractmethod
    def accept(self, visitor: InsuranceVisitor) -> str:
        """Let the visitor handle this kind of client."""


class Bank(Client):
    def accept(self, visitor: InsuranceVisitor) -> str:
        return visitor.visit_bank(self)


class Company(Client):
    def accept(self, visitor: InsuranceVisitor) -> str:
        return visitor.visit_company(self)


class Resident(Client):
    def accept(self, visitor: InsuranceVisitor) -> str:
        return visitor.visit_resident(self)


class InsuranceVisitor:
    """Offers each client the insurance that suits its kind."""

    def __init__(self, clients: Iterable[Client], out: Optional[TextIO] = None) -> None:
        self.clients = list(clients)
        self._out = out

    def _share(self, insurance: str, client: Client) -> str:
        line = f"Sharing details regarding {insurance} Insurance to {client.name}.."
        _write(self._out, line + "\n")
        return line

    def visit_bank(self, client: Bank) -> str:
        return self._share("Theft", client)

    def visit_company(self, client: Company) -> str:
        return self._share("Equipment", client)

    def visit_resident(self, client: Resident) -> str:
        return self._share("Medical", client)

    def visit_clients(self) -> list[str]:
        return [client.accept(self) for client in self.clients]