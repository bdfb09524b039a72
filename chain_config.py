from dataclasses import dataclass

from errors import ConfigurationError


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int  # Wormhole chain id
    evm_chain_id: int
    rpc_url: str
    token_router_address: str
    usdc_address: str


# Router addresses: wormhole-dashboard watcher/src/fastTransfer/consts.ts
# USDC addresses: https://developers.circle.com/stablecoins/usdc-on-test-networks
CHAIN_CONFIGS = {
    10003: ChainConfig(  # ArbitrumSepolia
        chain_id=10003,
        evm_chain_id=421614,
        rpc_url="https://sepolia-rollup.arbitrum.io/rpc",
        token_router_address="0xe0418C44F06B0b0D7D1706E01706316DBB0B210E",
        usdc_address="0x75faf114eafb1BDbe2F0316DF893fd58CE46AA4d",
    ),
    10005: ChainConfig(  # OptimismSepolia
        chain_id=10005,
        evm_chain_id=11155420,
        rpc_url="https://sepolia.optimism.io",
        token_router_address="0x6BAa7397c18abe6221b4f6C3Ac91C88a9faE00D8",
        usdc_address="0x5fd84259d66Cd46123540766Be93DFE6D43130D7",
    ),
}


def get_chain_config(chain_id: int) -> ChainConfig:
    try:
        return CHAIN_CONFIGS[chain_id]
    except KeyError:
        raise ConfigurationError(f"No configuration for chain {chain_id}") from None
