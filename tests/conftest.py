import pytest
from eth_abi import encode

WALLET = "0x1111111111111111111111111111111111111111"
ROUTER = "0xe0418C44F06B0b0D7D1706E01706316DBB0B210E"
DESTINATION_ROUTER = "0x6BAa7397c18abe6221b4f6C3Ac91C88a9faE00D8"
TOKEN = "0x75faf114eafb1BDbe2F0316DF893fd58CE46AA4d"
PRIVATE_KEY = "0x" + "ab" * 32


def order_receipt(sequence=11, fast_sequence=12, protocol_sequence=13):
    data = encode(
        ["uint64", "uint64", "uint256"], [sequence, fast_sequence, protocol_sequence]
    )
    return {"status": 1, "logs": [{"data": data}]}


class FakeDapp:
    """Records reads and writes; every write goes to a journal shared between contracts."""

    def __init__(self, address, journal, reads=None, receipt=None, fail_on=None):
        self.address = address
        self.journal = journal
        self.reads = reads or {}
        self.receipt = receipt or {"status": 1, "logs": []}
        self.fail_on = fail_on or {}
        self.calls = []
        self.transactions = []

    def account_address(self, private_key):
        return WALLET

    def call(self, function_name, *args):
        self.calls.append((function_name, args))
        return self.reads[function_name]

    def execute_transaction(self, private_key, function_name, args, value=0, gas=None):
        self.transactions.append((function_name, tuple(args), gas))
        self.journal.append(function_name)
        if function_name in self.fail_on:
            raise self.fail_on[function_name]
        return f"0x{function_name}", self.receipt


@pytest.fixture
def journal():
    return []


@pytest.fixture
def token(journal):
    return FakeDapp(TOKEN, journal, reads={"balanceOf": 20_000_000, "allowance": 0})


@pytest.fixture
def router(journal):
    return FakeDapp(ROUTER, journal, receipt=order_receipt())


@pytest.fixture
def destination(journal):
    return FakeDapp(
        DESTINATION_ROUTER,
        journal,
        reads={"getFastTransferParameters": (True, 1_000_000_000, 5, 3)},
    )
