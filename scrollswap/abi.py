"""Contract interface definitions for the tokens involved in the swap."""


def _fn(name, inputs, outputs, mutability, payable=False):
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": n, "type": t} for n, t in outputs],
        "stateMutability": "payable" if payable else mutability,
    }


def _event(name, inputs):
    return {
        "type": "event",
        "name": name,
        "anonymous": False,
        "inputs": [
            {"name": n, "type": t, "indexed": indexed} for n, t, indexed in inputs
        ],
    }


ERC20_ABI = [
    _fn("name", [], [("", "string")], "view"),
    _fn("symbol", [], [("", "string")], "view"),
    _fn("decimals", [], [("", "uint8")], "view"),
    _fn("totalSupply", [], [("", "uint256")], "view"),
    _fn("balanceOf", [("account", "address")], [("", "uint256")], "view"),
    _fn(
        "allowance",
        [("owner", "address"), ("spender", "address")],
        [("", "uint256")],
        "view",
    ),
    _fn(
        "approve",
        [("spender", "address"), ("value", "uint256")],
        [("", "bool")],
        "nonpayable",
    ),
    _fn(
        "transfer",
        [("to", "address"), ("value", "uint256")],
        [("", "bool")],
        "nonpayable",
    ),
    _fn(
        "transferFrom",
        [("from", "address"), ("to", "address"), ("value", "uint256")],
        [("", "bool")],
        "nonpayable",
    ),
    _event(
        "Approval",
        [("owner", "address", True), ("spender", "address", True), ("value", "uint256", False)],
    ),
    _event(
        "Transfer",
        [("from", "address", True), ("to", "address", True), ("value", "uint256", False)],
    ),
]

# WETH9: ERC-20 plus wrap/unwrap of the native asset
WETH_ABI = ERC20_ABI + [
    _fn("deposit", [], [], "payable", payable=True),
    _fn("withdraw", [("wad", "uint256")], [], "nonpayable"),
    _event("Deposit", [("dst", "address", True), ("wad", "uint256", False)]),
    _event("Withdrawal", [("src", "address", True), ("wad", "uint256", False)]),
]
