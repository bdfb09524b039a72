import logging
import os
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from chain_config import ChainConfig, get_chain_config
from contract_abi import erc20_abi, token_router_abi
from errors import ConfigurationError, FastOrderError, RemoteCallError
from fast_order import (
    Dapp,
    FeeStrategy,
    FixedFee,
    OrderRequest,
    SubmissionResult,
    place_fast_market_order,
    query_minimum_fee,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# --CONFIG--#
# Put PRIVATE_KEY in .env next to this file or export it in the environment
ORIGIN_CHAIN = 10003  # |Wormhole chain id of the origin, ArbitrumSepolia
TARGET_CHAIN = 10005  # |Wormhole chain id of the destination, OptimismSepolia
AMOUNT_IN = 101_000_000  # |101 USDC, the router's minimum is 100 USDC
REDEEMER = "0x08Ab1Ce3686cb7E616af2D3E068356B160c4c038"
REDEEMER_MESSAGE = "Epoch Test"
QUERY_MINIMUM_FEE = True  # |Read the minimum fee from the router instead of MAX_FEE
MAX_FEE = 100_000  # |0.1 USDC
DEADLINE_SECONDS = 3600  # |Order deadline, from now
# ----------#


def load_private_key() -> str:
    load_dotenv(Path(__file__).parent / ".env")
    private_key = os.getenv("PRIVATE_KEY")
    if not private_key:
        raise ConfigurationError("PRIVATE_KEY not found in environment variables")
    return private_key


def run(
    private_key: str,
    origin: ChainConfig,
    request: OrderRequest,
    fee_strategy: FeeStrategy,
) -> SubmissionResult:
    destination = get_chain_config(request.target_chain)
    token = Dapp(origin.rpc_url, origin.usdc_address, erc20_abi, origin.evm_chain_id)
    router = Dapp(
        origin.rpc_url, origin.token_router_address, token_router_abi, origin.evm_chain_id
    )
    destination_router = Dapp(
        destination.rpc_url,
        destination.token_router_address,
        token_router_abi,
        destination.evm_chain_id,
    )
    logger.info(f"From chain: {origin.chain_id}")
    logger.info(f"To chain: {destination.chain_id}")
    logger.info(f"Amount: {request.amount_in}")
    return place_fast_market_order(
        token, router, destination_router, private_key, request, fee_strategy
    )


def main() -> int:
    try:
        private_key = load_private_key()
        origin = get_chain_config(ORIGIN_CHAIN)
        request = OrderRequest(
            amount_in=AMOUNT_IN,
            target_chain=TARGET_CHAIN,
            redeemer=REDEEMER,
            redeemer_message=REDEEMER_MESSAGE,
            deadline=int(time.time()) + DEADLINE_SECONDS,
        )
        fee_strategy = query_minimum_fee if QUERY_MINIMUM_FEE else FixedFee(MAX_FEE)
        result = run(private_key, origin, request, fee_strategy)
    except RemoteCallError as e:
        logger.error(f"Error: {e.message}")
        logger.error(f"Reason: {e.reason}")
        logger.error(f"Data: {e.data}")
        logger.error(f"Transaction: {e.transaction}")
        return 1
    except FastOrderError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception:
        logger.exception("Unexpected error while placing fast market order")
        return 1

    logger.info(f"View on Wormhole Explorer: {result.explorer_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
