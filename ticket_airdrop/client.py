"""
BitShares node client supplying tickets, block signatures and account names
"""

import logging
import requests
from typing import Any, Dict, Iterable, List, Optional

from .errors import NodeError

logger = logging.getLogger(__name__)

TICKET_PREFIX = '1.18.'


def ticket_number(ticket_id: str) -> int:
    """Numeric instance of a ticket object id ('1.18.42' -> 42)."""
    if not ticket_id.startswith(TICKET_PREFIX):
        raise NodeError(f"Not a ticket id: {ticket_id}")
    return int(ticket_id[len(TICKET_PREFIX):])


class BitsharesClient:
    """
    Minimal JSON-RPC client for a BitShares node's HTTP endpoint.

    Example:
        >>> with BitsharesClient("http://localhost:8090") as client:
        ...     signature = client.get_block_signature(1000)
    """

    def __init__(self, base_url: str = "http://localhost:8090", timeout: int = 30):
        """
        Initialize the client.

        Args:
            base_url: Node RPC URL (default: http://localhost:8090)
            timeout: Request timeout in seconds (default: 30)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
        })
        self._request_id = 0

    def _call(self, method: str, params: List[Any]) -> Any:
        """Call a database API method"""
        self._request_id += 1
        response = self.session.post(
            self.base_url,
            json={
                'jsonrpc': '2.0',
                'id': self._request_id,
                'method': 'call',
                'params': ['database', method, params],
            },
            timeout=self.timeout
        )
        response.raise_for_status()
        payload = response.json()
        if payload.get('error'):
            raise NodeError(f"{method} failed: {payload['error']}")
        return payload.get('result')

    # Ledger

    def list_tickets(self, limit: int = 100, from_id: str = '1.18.0') -> List[Dict[str, Any]]:
        """
        List ticket objects starting at an id.

        Args:
            limit: Maximum number of tickets (node maximum is 100)
            from_id: First ticket id to return

        Returns:
            List of raw ticket dicts
        """
        return self._call('list_tickets', [limit, from_id]) or []

    def fetch_tickets(
        self,
        start: int = 0,
        batch_size: int = 100,
        max_batches: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Page through every ticket from `start` onwards.

        Args:
            start: Numeric id of the first ticket
            batch_size: Tickets per request
            max_batches: Stop after this many requests (default: no limit)

        Returns:
            List of raw ticket dicts, ordered by id, without duplicates
        """
        tickets: List[Dict[str, Any]] = []
        seen = set()
        cursor = start
        batches = 0
        while max_batches is None or batches < max_batches:
            batch = self.list_tickets(batch_size, f"{TICKET_PREFIX}{cursor}")
            batches += 1
            if not batch:
                break
            for ticket in batch:
                if ticket['id'] in seen:
                    logger.warning("Duplicate: %s", ticket['id'])
                    continue
                seen.add(ticket['id'])
                tickets.append(ticket)
            logger.info("Fetched tickets: %s to %s", batch[0]['id'], batch[-1]['id'])
            cursor = ticket_number(batch[-1]['id']) + 1
            if len(batch) < batch_size:
                break
        return tickets

    # Blocks

    def get_block_signature(self, block_number: int) -> str:
        """
        Get the witness signature of a block.

        Args:
            block_number: Block height

        Returns:
            Witness signature string

        Raises:
            NodeError: If the block does not exist
        """
        block = self._call('get_block', [block_number])
        if not block or not block.get('witness_signature'):
            raise NodeError(f"Block {block_number} not found")
        return block['witness_signature']

    # Accounts

    def get_account_names(self, account_ids: Iterable[str]) -> Dict[str, str]:
        """
        Resolve account ids to account names.

        Args:
            account_ids: Account object ids (1.2.x)

        Returns:
            dict of id -> name for the accounts the node knows
        """
        ids = list(account_ids)
        if not ids:
            return {}
        objects = self._call('get_objects', [ids]) or []
        return {obj['id']: obj['name'] for obj in objects if obj}

    def close(self):
        """Close the session"""
        self.session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, *args):
        """Context manager exit"""
        self.close()
