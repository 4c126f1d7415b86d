import pytest

from flight_analyzer.models import Ticket, TicketCollection, TicketDataError
from flight_analyzer.sources import TicketSourceNotFound, load_ticket_collection, parse_ticket_collection, write_report

PAYLOAD = {
    "origin": "VVO",
    "destination": "TLV",
    "carrier": "SU",
    "departure_date": "12.05.18",
    "departure_time": "9:40",
    "arrival_date": "12.05.18",
    "arrival_time": "19:25",
    "stops": 3,
    "price": 12450,
}


def test_ticket_from_dict_keeps_fields_verbatim():
    ticket = Ticket.from_dict({**PAYLOAD, "origin": " vvo"})

    assert ticket.origin == " vvo"
    assert ticket.price == 12450
    assert ticket.has_schedule()


def test_ticket_from_dict_missing_fields_become_none():
    ticket = Ticket.from_dict({"origin": "VVO"})

    assert ticket.carrier is None
    assert ticket.price is None
    assert not ticket.has_schedule()


def test_ticket_price_accepts_numeric_string():
    assert Ticket.from_dict({**PAYLOAD, "price": "15300"}).price == 15300


@pytest.mark.parametrize("price", [True, 12.5, "cheap", [1]])
def test_ticket_price_rejects_non_integers(price):
    with pytest.raises(TicketDataError):
        Ticket.from_dict({**PAYLOAD, "price": price})


def test_ticket_rejects_non_string_fields():
    with pytest.raises(TicketDataError):
        Ticket.from_dict({**PAYLOAD, "departure_time": 940})


def test_tickets_are_structurally_equal_and_immutable():
    first = Ticket.from_dict(PAYLOAD)

    assert first == Ticket.from_dict(dict(PAYLOAD))
    with pytest.raises(AttributeError):
        first.price = 1


@pytest.mark.parametrize("payload", [[], {"flights": []}, {"tickets": {}}, {"tickets": [1]}])
def test_collection_rejects_bad_shapes(payload):
    with pytest.raises(TicketDataError):
        TicketCollection.from_dict(payload)


def test_collection_preserves_order():
    collection = TicketCollection.from_dict({"tickets": [PAYLOAD, {**PAYLOAD, "carrier": "S7"}]})

    assert len(collection) == 2
    assert [ticket.carrier for ticket in collection] == ["SU", "S7"]


def test_parse_ticket_collection_rejects_malformed_json():
    with pytest.raises(TicketDataError):
        parse_ticket_collection('{"tickets": [')


def test_load_bundled_tickets():
    collection = load_ticket_collection()

    assert len(collection) == 10
    assert {ticket.carrier for ticket in collection} == {"TK", "S7", "SU", "BA"}


def test_load_tickets_from_file(tmp_path):
    path = tmp_path / "tickets.json"
    path.write_text('{"tickets": [{"origin": "VVO", "price": 5}]}', encoding="utf-8")

    collection = load_ticket_collection(path)

    assert list(collection) == [Ticket(origin="VVO", price=5)]


def test_load_tickets_missing_file(tmp_path):
    with pytest.raises(TicketSourceNotFound):
        load_ticket_collection(tmp_path / "missing.json")


def test_write_report_creates_parent_dirs(tmp_path):
    target = write_report(tmp_path / "out" / "report.txt", "Не найдены подходящие билеты.")

    assert target.read_text(encoding="utf-8") == "Не найдены подходящие билеты."
