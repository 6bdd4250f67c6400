#!/usr/bin/env python3
"""Live smoke check of the BitShares node client"""

import sys

from ticket_airdrop import BitsharesClient, digitize, parse_record


def check_node(url: str = "http://localhost:8090") -> int:
    print("═" * 63)
    print(f"TICKET AIRDROP NODE CHECK: {url}")
    print("═" * 63 + "\n")

    client = BitsharesClient(url)
    passed = 0
    failed = 0

    # 1: first batch of tickets parses
    try:
        print("TEST 1: List tickets...")
        tickets = client.list_tickets(10)
        entries = [parse_record(t) for t in tickets]
        print(f"  ✓ {len(entries)} tickets, first: {entries[0].id if entries else '-'}")
        passed += 1
    except Exception as e:
        print(f"  ✗ Failed: {e}")
        failed += 1
        entries = []

    # 2: block signature digitizes
    try:
        print("\nTEST 2: Block signature...")
        signature = client.get_block_signature(1)
        print(f"  ✓ {signature[:16]}... -> {len(digitize(signature))} digits")
        passed += 1
    except Exception as e:
        print(f"  ✗ Failed: {e}")
        failed += 1

    # 3: owner names resolve
    try:
        print("\nTEST 3: Account names...")
        names = client.get_account_names({e.account for e in entries})
        print(f"  ✓ Resolved {len(names)} names")
        passed += 1
    except Exception as e:
        print(f"  ✗ Failed: {e}")
        failed += 1

    client.close()
    print("\n" + "═" * 63)
    print(f"RESULTS: {passed} passed, {failed} failed")
    print("═" * 63 + "\n")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(check_node(*sys.argv[1:2]))
