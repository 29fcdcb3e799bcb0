"""Console output shared by the CLI commands"""
import json
from typing import Dict


def print_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def report(result: Dict) -> int:
    """Print the confirmation or the error of an operation result, return the exit code"""
    if result.get("ok"):
        if result.get("message"):
            print(f"✅ {result['message']}")
        return 0
    error = result.get("error") or {}
    print(f"❌ {error.get('kind', 'Error')}: {error.get('message', result.get('message', ''))}")
    return 1


def format_merchant(merchant: Dict) -> str:
    if not merchant["hired"]:
        return f"  {merchant['name']} (capacity {merchant['capacity']}) - available for hire"
    cargo = ", ".join(f"{qty} {good}" for good, qty in merchant["inventory"].items() if qty > 0)
    if merchant["status"] == "traveling":
        where = f"traveling {merchant['currentLocation']} -> {merchant['destination']} (arrives {merchant['arrivalTime']})"
    else:
        where = f"idle at {merchant['currentLocation']}"
    return f"  {merchant['name']} (capacity {merchant['capacity']}) - {where}; cargo: {cargo or 'empty'}"
