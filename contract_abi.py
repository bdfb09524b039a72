token_router_abi = """[{"inputs":[{"internalType":"uint64","name":"amountIn","type":"uint64"},{"internalType":"uint16","name":"targetChain","type":"uint16"},{"internalType":"bytes32","name":"redeemer","type":"bytes32"},{"internalType":"bytes","name":"redeemerMessage","type":"bytes"},{"internalType":"uint64","name":"maxFee","type":"uint64"},{"internalType":"uint32","name":"deadline","type":"uint32"}],"name":"placeFastMarketOrder","outputs":[{"internalType":"uint64","name":"sequence","type":"uint64"},{"internalType":"uint64","name":"fastSequence","type":"uint64"},{"internalType":"uint256","name":"protocolSequence","type":"uint256"}],"stateMutability":"payable","type":"function"},{"inputs":[],"name":"getFastTransferParameters","outputs":[{"components":[{"internalType":"bool","name":"enabled","type":"bool"},{"internalType":"uint64","name":"maxAmount","type":"uint64"},{"internalType":"uint64","name":"baseFee","type":"uint64"},{"internalType":"uint64","name":"initAuctionFee","type":"uint64"}],"internalType":"struct FastTransferParameters","name":"","type":"tuple"}],"stateMutability":"view","type":"function"}]"""
erc20_abi = """[{"inputs":[{"internalType":"address","name":"account","type":"address"}],"name":"balanceOf","outputs":[{"internalType":"uint256","name":"","type":"uint256"}],"stateMutability":"view","type":"function"},{"inputs":[{"internalType":"address","name":"owner","type":"address"},{"internalType":"address","name":"spender","type":"address"}],"name":"allowance","outputs":[{"internalType":"uint256","name":"","type":"uint256"}],"stateMutability":"view","type":"function"},{"inputs":[{"internalType":"address","name":"spender","type":"address"},{"internalType":"uint256","name":"amount","type":"uint256"}],"name":"approve","outputs":[{"internalType":"bool","name":"","type":"bool"}],"stateMutability":"nonpayable","type":"function"}]"""
