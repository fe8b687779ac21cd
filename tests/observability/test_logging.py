
import json
import logging
from denserank.context import Rank, RankedItem
from denserank.observability.logging import log_ranking_result

def _payloads(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == "denserank"]

def test_log_ranking_result_payload(caplog):
    ranked = [
        RankedItem(Rank(1), 10),
        RankedItem(Rank(1), 10),
        RankedItem(Rank(2), 20),
    ]
    with caplog.at_level(logging.INFO, logger="denserank"):
        log_ranking_result("r-1", ranked)

    payloads = _payloads(caplog)
    assert len(payloads) == 1
    data = payloads[0]
    assert data["event"] == "ranking_generated"
    assert data["ranking_id"] == "r-1"
    assert data["item_count"] == 3
    assert data["distinct_ranks"] == 2
    assert data["items"][2] == {"position": 3, "rank": 2, "item": 20}

def test_log_ranking_result_stringifies_unserializable_items(caplog):
    class Thing:
        def __str__(self):
            return "thing"

    with caplog.at_level(logging.INFO, logger="denserank"):
        log_ranking_result("r-2", [RankedItem(Rank(1), Thing())])

    data = _payloads(caplog)[0]
    assert data["items"][0]["item"] == "thing"

def test_log_ranking_result_empty(caplog):
    with caplog.at_level(logging.INFO, logger="denserank"):
        log_ranking_result("r-3", [])

    data = _payloads(caplog)[0]
    assert data["item_count"] == 0
    assert data["distinct_ranks"] == 0
    assert data["items"] == []

def test_log_ranking_result_stringifies_dict_with_tuple_keys(caplog):
    item = {(1, 2): 'x'}
    with caplog.at_level(logging.INFO, logger="denserank"):
        log_ranking_result("r-4", [RankedItem(Rank(1), item)])

    data = _payloads(caplog)[0]
    assert data["items"][0]["item"] == str(item)

def test_log_ranking_result_stringifies_circular_item(caplog):
    item = [1]
    item.append(item)
    with caplog.at_level(logging.INFO, logger="denserank"):
        log_ranking_result("r-5", [RankedItem(Rank(1), item)])

    data = _payloads(caplog)[0]
    assert data["items"][0]["item"] == "[1, [...]]"

def test_log_ranking_result_keeps_serializable_items(caplog):
    item = {'id': 3, 'tags': ['a', 'b']}
    with caplog.at_level(logging.INFO, logger="denserank"):
        log_ranking_result("r-6", [RankedItem(Rank(1), item)])

    data = _payloads(caplog)[0]
    assert data["items"][0]["item"] == item
