"""Offline audit trail with Ed25519 signatures and hash chaining.

Only metadata about sharing operations is recorded (threshold, share count,
modulus size, share indices). Secrets and share values never reach disk.

Every entry names the chain hash of its predecessor. ``verify_log`` checks a
single entry; ``verify_chain`` walks the whole directory from ``GENESIS`` and
detects deleted, reordered or forked entries.
"""
from __future__ import annotations

import hashlib
import json
import os
import threading
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from filelock import FileLock

GENESIS = "GENESIS"


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


class AuditTrail:
    """Append-only, signed event log stored as one JSON file per event.

    Safe to share between threads and processes: key creation and the
    read-sign-write-advance sequence of ``record_event`` run under a thread
    lock and a lock file in the audit directory.
    """

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"
        self._lock = threading.Lock()
        self._file_lock = FileLock(str(self.directory / ".audit.lock"))

    def _ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def _load_private_key(self) -> Ed25519PrivateKey:
        # caller holds both locks
        if self.key_path.exists():
            data = self.key_path.read_bytes()
            return serialization.load_pem_private_key(data, password=None)
        private_key = Ed25519PrivateKey.generate()
        tmp_path = self.key_path.with_name(f".{self.key_path.name}.{uuid.uuid4().hex}.tmp")
        tmp_path.write_bytes(
            private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )
        os.replace(tmp_path, self.key_path)
        return private_key

    def _public_key(self) -> Ed25519PublicKey:
        self._ensure_directory()
        with self._lock, self._file_lock:
            return self._load_private_key().public_key()

    def _load_prev_hash(self) -> str:
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def record_event(self, event: str, *, details: Dict[str, Any] | None = None) -> Path:
        self._ensure_directory()
        with self._lock, self._file_lock:
            private_key = self._load_private_key()
            timestamp = int(time.time())
            payload = {
                "event": event,
                "details": details or {},
                "timestamp": timestamp,
                "prev_hash": self._load_prev_hash(),
            }
            message = _canonical(payload)
            signature = private_key.sign(message)
            chain_hash = hashlib.sha3_512(message + signature).hexdigest()
            entry = {
                "payload": payload,
                "signature": signature.hex(),
                "chain_hash": chain_hash,
            }
            file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
            file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
            self.chain_state_path.write_text(chain_hash)
        return file_path

    @staticmethod
    def _entry_is_valid(data: Dict[str, Any], public_key: Ed25519PublicKey) -> bool:
        payload = _canonical(data["payload"])
        signature_hex = data.get("signature")
        signature = bytes.fromhex(signature_hex) if signature_hex else b""
        try:
            public_key.verify(signature, payload)
        except InvalidSignature:
            return False
        expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
        return expected_chain_hash == data.get("chain_hash")

    def verify_log(self, path: os.PathLike[str] | str) -> bool:
        """Check the signature and chain hash of one entry."""
        data = json.loads(Path(path).read_text())
        return self._entry_is_valid(data, self._public_key())

    def verify_chain(self) -> bool:
        """Check every entry and that they form one unbroken chain.

        The walk starts at ``GENESIS``, follows ``prev_hash`` links and must
        visit every entry file and end at the hash stored in ``chain.state``.
        """
        public_key = self._public_key()
        by_prev: Dict[str, Dict[str, Any]] = {}
        for path in self.directory.glob("audit_*.json"):
            data = json.loads(path.read_text())
            if not self._entry_is_valid(data, public_key):
                return False
            prev_hash = data["payload"].get("prev_hash")
            if prev_hash in by_prev:
                return False
            by_prev[prev_hash] = data
        current = GENESIS
        visited = 0
        while current in by_prev:
            current = by_prev[current]["chain_hash"]
            visited += 1
        return visited == len(by_prev) and current == self._load_prev_hash()


__all__ = ["AuditTrail", "GENESIS"]
