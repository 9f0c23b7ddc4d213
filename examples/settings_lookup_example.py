from __future__ import annotations

from typing import Any, Dict

from maybe_functors import Absent, Maybe, Present, check_laws, lift2
from maybe_functors.laws.report import LawReport


SETTINGS: Dict[str, Any] = {
    "database": {"host": "db.internal", "port": "5432"},
    "cache": {"host": "cache.internal"},
}


def lookup(key: str):
    def step(section: Dict[str, Any]) -> Maybe[Any]:
        return Present(section[key]) if key in section else Absent()

    return step


def parse_port(raw: str) -> Maybe[int]:
    return Present(int(raw)) if raw.isdigit() else Absent()


def endpoint(section: str) -> Maybe[str]:
    root = Present(SETTINGS)
    host = root.bind(lookup(section)).bind(lookup("host"))
    port = root.bind(lookup(section)).bind(lookup("port")).bind(parse_port)
    return lift2(lambda h, p: f"{h}:{p}", host, port)


def run_demo():
    for section in ("database", "cache", "queue"):
        print(section, endpoint(section))
    print(LawReport(check_laws()))


if __name__ == "__main__":
    run_demo()
