"""Approve the token spend and place a fast market order on the token router."""

import logging
import string
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from eth_abi import decode
from web3 import Web3
from web3.exceptions import ContractLogicError, Web3Exception

from errors import OrderValidationError, RemoteCallError, TransactionFailedError

logger = logging.getLogger(__name__)

# Fixed gas limit for placeFastMarketOrder; estimation fails on the router's internal path
PLACE_ORDER_GAS_LIMIT = 1_000_000
DEFAULT_RECEIPT_TIMEOUT = 120
EXPLORER_TX_URL = "https://wormholescan.io/#/tx/{}"

UINT16_MAX = 2**16 - 1
UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1


class Dapp:
    def __init__(
        self,
        web3_provider: str,
        contract_address: str,
        abi,
        chain_id: int,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ):
        self.web3 = Web3(Web3.HTTPProvider(web3_provider))
        self.address = Web3.to_checksum_address(contract_address)
        self.contract = self.web3.eth.contract(self.address, abi=abi)
        self.chain_id = chain_id
        self.receipt_timeout = receipt_timeout

    def account_address(self, private_key: str) -> str:
        return self.web3.eth.account.from_key(private_key).address

    def call(self, function_name: str, *args):
        try:
            return getattr(self.contract.functions, function_name)(*args).call()
        except ContractLogicError as e:
            raise RemoteCallError(
                f"{function_name} call reverted: {e}", reason=e.message, data=e.data
            ) from e
        except Web3Exception as e:
            raise RemoteCallError(f"{function_name} call failed: {e}") from e

    def execute_transaction(
        self,
        private_key: str,
        function_name: str,
        args: tuple,
        value: int = 0,
        gas: Optional[int] = None,
    ) -> Tuple[str, dict]:
        """
        Sign and send a contract call, then block until it is mined.

        Returns the 0x-prefixed transaction hash and the receipt. A mined
        transaction with status 0 raises TransactionFailedError; node and
        contract errors are re-raised as RemoteCallError with the sent
        transaction fields attached.
        """
        address = self.account_address(private_key)
        params = {"from": address, "value": value}
        transaction = None
        try:
            params["nonce"] = self.web3.eth.get_transaction_count(address)
            params["chainId"] = self.chain_id
            params["gasPrice"] = self.web3.eth.gas_price
            if gas is not None:
                params["gas"] = gas
            # build_transaction estimates gas when no explicit limit is given
            transaction = getattr(self.contract.functions, function_name)(
                *args
            ).build_transaction(params)
            signed_txn = self.web3.eth.account.sign_transaction(transaction, private_key)
            tx_hash = self.web3.eth.send_raw_transaction(signed_txn.raw_transaction)
            transaction_hash = self.web3.to_hex(tx_hash)
            logger.info(f"{function_name} | Hash: {transaction_hash}")
            receipt = self.web3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.receipt_timeout
            )
        except ContractLogicError as e:
            raise RemoteCallError(
                f"{function_name} reverted: {e}",
                reason=e.message,
                data=e.data,
                transaction=_echo_transaction(transaction or params, self.address),
            ) from e
        except Web3Exception as e:
            raise RemoteCallError(
                f"{function_name} failed: {e}",
                transaction=_echo_transaction(transaction or params, self.address),
            ) from e

        if receipt["status"] == 0:
            raise TransactionFailedError(
                transaction_hash, transaction=_echo_transaction(transaction, self.address)
            )
        return transaction_hash, receipt


def _echo_transaction(transaction: dict, to: str) -> dict:
    return {
        "to": transaction.get("to", to),
        "from": transaction.get("from"),
        "data": transaction.get("data"),
        "value": str(transaction.get("value", 0)),
    }


@dataclass(frozen=True)
class OrderRequest:
    amount_in: int
    target_chain: int
    redeemer: str
    redeemer_message: Union[bytes, str]
    deadline: int


@dataclass(frozen=True)
class FastMarketOrder:
    amount_in: int
    target_chain: int
    redeemer: bytes
    redeemer_message: bytes
    max_fee: int
    deadline: int

    def args(self) -> tuple:
        return (
            self.amount_in,
            self.target_chain,
            self.redeemer,
            self.redeemer_message,
            self.max_fee,
            self.deadline,
        )


@dataclass(frozen=True)
class FastTransferParameters:
    enabled: bool
    max_amount: int
    base_fee: int
    init_auction_fee: int

    @property
    def minimum_fee(self) -> int:
        # strictly above the sum the router charges
        return self.base_fee + self.init_auction_fee + 1


@dataclass(frozen=True)
class SubmissionResult:
    tx_hash: str
    sequence: int
    fast_sequence: int
    protocol_sequence: int
    max_fee: int
    approve_tx_hash: Optional[str] = None

    @property
    def explorer_url(self) -> str:
        return EXPLORER_TX_URL.format(self.tx_hash)


FeeStrategy = Callable[[Dapp], int]


class FixedFee:
    def __init__(self, value: int):
        self.value = value

    def __call__(self, router: Dapp) -> int:
        logger.info(f"Using fixed max fee: {self.value}")
        return self.value


def query_minimum_fee(destination_router: Dapp) -> int:
    enabled, max_amount, base_fee, init_auction_fee = destination_router.call(
        "getFastTransferParameters"
    )
    parameters = FastTransferParameters(enabled, max_amount, base_fee, init_auction_fee)
    logger.info(f"Fast transfer parameters: {parameters}")
    logger.info(f"Minimum fee: {parameters.minimum_fee}")
    return parameters.minimum_fee


def address_to_bytes32(address: str) -> bytes:
    stripped = address[2:] if address.lower().startswith("0x") else address
    if len(stripped) > 64:
        raise OrderValidationError(f"Address {address} is longer than 32 bytes")
    # bytes.fromhex skips whitespace, which would shorten the result
    if any(c not in string.hexdigits for c in stripped):
        raise OrderValidationError(f"Address {address} is not valid hex")
    return bytes.fromhex(stripped.rjust(64, "0"))


def _check_range(name: str, value: int, maximum: int):
    if not 0 <= value <= maximum:
        raise OrderValidationError(f"{name} ({value}) is out of range [0, {maximum}]")


def build_order(request: OrderRequest, max_fee: int) -> FastMarketOrder:
    _check_range("amountIn", request.amount_in, UINT64_MAX)
    _check_range("targetChain", request.target_chain, UINT16_MAX)
    _check_range("maxFee", max_fee, UINT64_MAX)
    _check_range("deadline", request.deadline, UINT32_MAX)
    if request.amount_in <= max_fee:
        raise OrderValidationError(
            f"amountIn ({request.amount_in}) must be greater than maxFee ({max_fee})"
        )

    message = request.redeemer_message
    if isinstance(message, str):
        message = message.encode("utf-8")

    return FastMarketOrder(
        amount_in=request.amount_in,
        target_chain=request.target_chain,
        redeemer=address_to_bytes32(request.redeemer),
        redeemer_message=message,
        max_fee=max_fee,
        deadline=request.deadline,
    )


def check_balance(balance: int, amount_in: int):
    if balance < amount_in:
        raise OrderValidationError(
            f"Insufficient token balance: {balance} < amountIn ({amount_in})"
        )


def ensure_allowance(
    token: Dapp, private_key: str, spender: str, amount: int
) -> Optional[str]:
    """Approve exactly `amount` for `spender` unless the current allowance covers it."""
    owner = token.account_address(private_key)
    current_allowance = token.call("allowance", owner, spender)
    logger.info(f"Current token allowance: {current_allowance}")

    if current_allowance >= amount:
        logger.info("Current allowance sufficient, proceeding with fast market order")
        return None

    logger.info("Current allowance insufficient, approving token for TokenRouter...")
    logger.info(f"Approving amount: {amount}")
    logger.info(f"Spender address: {spender}")
    approve_hash, _ = token.execute_transaction(private_key, "approve", (spender, amount))
    logger.info("Token approved for TokenRouter")
    return approve_hash


def decode_sequences(receipt) -> Tuple[int, int, int]:
    # an order without the expected log is an unexpected response; let it raise
    first_log = receipt["logs"][0]
    sequence, fast_sequence, protocol_sequence = decode(
        ["uint64", "uint64", "uint256"], bytes(first_log["data"])[:96]
    )
    return sequence, fast_sequence, protocol_sequence


def place_fast_market_order(
    token: Dapp,
    router: Dapp,
    destination_router: Dapp,
    private_key: str,
    request: OrderRequest,
    fee_strategy: FeeStrategy,
) -> SubmissionResult:
    """
    Place one fast market order through `router` on the origin chain.

    The fee strategy reads from `destination_router`, the router on the
    target chain. No write call is made before the order passes validation
    and the balance check.
    """
    max_fee = fee_strategy(destination_router)
    order = build_order(request, max_fee)

    wallet_address = token.account_address(private_key)
    logger.info(f"Wallet address: {wallet_address}")
    logger.info(f"Using contract: {router.address}")

    balance = token.call("balanceOf", wallet_address)
    logger.info(f"Token balance: {balance}")
    check_balance(balance, order.amount_in)

    approve_hash = ensure_allowance(token, private_key, router.address, order.amount_in)

    logger.info("Sending fast market order...")
    logger.info(
        f"Full params: amountIn={order.amount_in} targetChain={order.target_chain} "
        f"redeemer={request.redeemer} maxFee={order.max_fee} deadline={order.deadline}"
    )
    tx_hash, receipt = router.execute_transaction(
        private_key, "placeFastMarketOrder", order.args(), gas=PLACE_ORDER_GAS_LIMIT
    )

    sequence, fast_sequence, protocol_sequence = decode_sequences(receipt)
    result = SubmissionResult(
        tx_hash=tx_hash,
        sequence=sequence,
        fast_sequence=fast_sequence,
        protocol_sequence=protocol_sequence,
        max_fee=max_fee,
        approve_tx_hash=approve_hash,
    )
    logger.info(f"Sequence: {result.sequence}")
    logger.info(f"Fast Sequence: {result.fast_sequence}")
    logger.info(f"Protocol Sequence: {result.protocol_sequence}")
    return result
