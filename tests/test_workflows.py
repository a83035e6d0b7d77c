import io
from datetime import date

import pytest

from toolchest.patterns.workflows import (
    Bank,
    CardPaymentStrategy,
    Company,
    CSVDataMiner,
    Document,
    DOCDataMiner,
    Draft,
    InsuranceVisitor,
    PaymentService,
    PDFDataMiner,
    Published,
    Resident,
    Review,
    UPIPaymentStrategy,
)

VALID_CARD = 5 * 10**15


def fixed_day():
    return date(2024, 6, 1)


def test_document_starts_as_draft():
    out = io.StringIO()
    document = Document("Some sample text", out=out)
    assert isinstance(document.state, Draft)
    assert document.render() == "(Draft): Some sample text\n\n"
    assert out.getvalue() == "(Draft): Some sample text\n\n"


def test_document_publish_walks_states():
    out = io.StringIO()
    document = Document("Some sample text", out=out)
    assert document.publish() == "Document state transitioned to 'Review'\n\n"
    assert isinstance(document.state, Review)
    assert document.publish() == "Document state transitioned to 'Published'\n\n"
    assert isinstance(document.state, Published)
    assert document.publish() == "Already published.\n"
    assert isinstance(document.state, Published)
    assert out.getvalue().count("Publishing document...\n") == 3


def test_document_transition_sets_state():
    document = Document("text", out=io.StringIO())
    document.transition(Published())
    assert document.render().startswith("(Published): ")


def test_card_payment_valid():
    card = CardPaymentStrategy(VALID_CARD, 2024, today=fixed_day, out=io.StringIO())
    assert card.validate() is True
    message = card.pay(200.0)
    assert message == "Payment of amount Rs.200 processed via Card# 50000***********."


def test_card_payment_expired():
    card = CardPaymentStrategy(VALID_CARD, 2023, today=fixed_day, out=io.StringIO())
    assert card.validate() is False
    assert card.pay(200.0) == "Invalid card details entered."


def test_card_payment_wrong_length():
    card = CardPaymentStrategy(VALID_CARD // 10, 2030, today=fixed_day, out=io.StringIO())
    assert card.validate() is False


def test_upi_payment_masks_identifier():
    out = io.StringIO()
    upi = UPIPaymentStrategy("abc@okicici", out=out)
    message = upi.pay(200.0)
    assert message.startswith("Payment of amount Rs.200 processed via UPI# abc@o")
    masked = message.rsplit("# ", 1)[1].rstrip(".")
    assert len(masked) == len("abc@okicici")
    assert out.getvalue() == message + "\n"


def test_upi_payment_invalid():
    upi = UPIPaymentStrategy("abc@@okicici", out=io.StringIO())
    assert upi.validate() is False
    assert upi.pay(10.0) == "UPI details is not valid."


def test_payment_service_without_method():
    with pytest.raises(RuntimeError):
        PaymentService(200.0).process_order()


def test_payment_service_uses_strategy():
    service = PaymentService(200.0)
    service.strategy = UPIPaymentStrategy("abc@okicici", out=io.StringIO())
    assert service.process_order() == service.strategy.pay(200.0)


@pytest.mark.parametrize(
    "miner, first",
    [
        (PDFDataMiner, "Extracting PDF data.."),
        (CSVDataMiner, "Extracting CSV data.."),
        (DOCDataMiner, "Extracting DOC data.."),
    ],
)
def test_data_miner_steps(miner, first):
    out = io.StringIO()
    steps = miner(out=out).mine()
    assert steps == [
        first,
        "Parsing extracted data..",
        "Analysing parsed data contents..",
        "Sending analysed data report..",
    ]
    assert out.getvalue().splitlines() == steps


def test_visitor_offers_matching_insurance():
    out = io.StringIO()
    visitor = InsuranceVisitor(
        [
            Bank("International Trust Bank", "1 Example Street"),
            Company("XYZ Corp", "2 Example Road"),
            Resident("John Doe", "3 Example Avenue"),
        ],
        out=out,
    )
    lines = visitor.visit_clients()
    assert lines == [
        "Sharing details regarding Theft Insurance to International Trust Bank..",
        "Sharing details regarding Equipment Insurance to XYZ Corp..",
        "Sharing details regarding Medical Insurance to John Doe..",
    ]
    assert out.getvalue().splitlines() == lines


def test_client_accept_dispatches():
    visitor = InsuranceVisitor([], out=io.StringIO())
    assert visitor.visit_clients() == []
    assert "Medical" in Resident("Jane", "addr").accept(visitor)