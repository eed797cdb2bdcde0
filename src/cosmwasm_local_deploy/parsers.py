"""Node CLI response decoders for cosmwasm-local-deploy."""

import json
from typing import Any, Dict, List, Optional

from .types import TxEvent, TxResult


def _load(raw: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def _parse_events(items: Any) -> List[TxEvent]:
    events = []
    for item in items or []:
        attributes = [
            (str(attr.get("key", "")), str(attr.get("value", "")))
            for attr in item.get("attributes") or []
        ]
        events.append(TxEvent(type=item.get("type", ""), attributes=attributes))
    return events


def parse_tx_result(raw: str) -> Optional[TxResult]:
    """
    Decode a `tx ... --output json` response.

    Events are taken from the first message log (`logs[0].events`), falling
    back to the top-level `events` list that newer SDK versions emit instead.

    Args:
        raw: Raw CLI stdout

    Returns:
        TxResult, or None if raw is not a JSON object
    """
    data = _load(raw)
    if data is None:
        return None

    logs = data.get("logs") or []
    if logs and logs[0].get("events"):
        events = _parse_events(logs[0]["events"])
    else:
        events = _parse_events(data.get("events"))

    return TxResult(
        txhash=data.get("txhash", ""),
        code=int(data.get("code") or 0),
        raw_log=data.get("raw_log", ""),
        events=events,
    )


def extract_code_id(raw: str) -> str:
    """
    Extract the code id from a `tx wasm store` response.

    Selects the `code_id` attribute of the last event that carries one. For
    wasmd's store response that is the second attribute of the trailing
    `store_code` event.

    Args:
        raw: Raw CLI stdout

    Returns:
        Code id string, empty if the response carries none
    """
    result = parse_tx_result(raw)
    if result is None:
        return ""

    for event in reversed(result.events):
        code_id = event.get("code_id")
        if code_id is not None:
            return code_id
    return ""


def parse_contract_listing(raw: str) -> List[str]:
    """
    Decode a `query wasm list-contract-by-code` response.

    Args:
        raw: Raw CLI stdout

    Returns:
        Contract addresses in the node's insertion order
    """
    data = _load(raw)
    if data is None:
        return []
    return [str(address) for address in data.get("contracts") or []]


def latest_contract_address(raw: str) -> Optional[str]:
    """
    Get the most recently instantiated contract from a listing.

    A null sentinel entry is returned as-is so callers can tell it apart
    from a listing that is still empty.

    Returns:
        Last listed entry, or None if the listing is empty
    """
    contracts = parse_contract_listing(raw)
    return contracts[-1] if contracts else None
