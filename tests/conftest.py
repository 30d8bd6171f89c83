"""
Shared fixtures: Hardhat-style artifacts, well-known keys, loguru capture
"""

import json

import pytest
from loguru import logger


# Hardhat's default development accounts #0 and #1
DEPLOYER_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
SECOND_KEY = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
SECOND_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

# PUSH1 0 PUSH1 0 RETURN: creates a contract with empty runtime code
INIT_CODE = "0x60006000f3"


def constructor_abi(*inputs):
    """ABI with only a constructor taking the given (name, type) inputs"""
    return [{
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [{"name": name, "type": typ, "internalType": typ} for name, typ in inputs]
    }]


def write_artifact(root, name, abi, bytecode=INIT_CODE, source=None, **extra):
    """Write <root>/contracts/<source>/<name>.json like `npx hardhat compile`"""
    source = source or f"{name}.sol"
    folder = root / "contracts" / source
    folder.mkdir(parents=True, exist_ok=True)

    data = {
        "_format": "hh-sol-artifact-1",
        "contractName": name,
        "sourceName": f"contracts/{source}",
        "abi": abi,
        "bytecode": bytecode,
        "deployedBytecode": "0x",
        "linkReferences": {},
        "deployedLinkReferences": {},
    }
    data.update(extra)

    path = folder / f"{name}.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    (folder / f"{name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/x.json"}),
        encoding="utf-8"
    )
    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts for the three Bachi contracts"""
    root = tmp_path / "artifacts"
    write_artifact(root, "BachiToken", constructor_abi(("name", "string"), ("symbol", "string")))
    write_artifact(
        root, "Node",
        constructor_abi(("name", "string"), ("symbol", "string"), ("nodeManager", "address"))
    )
    write_artifact(root, "NodeManager", constructor_abi(("node", "address")))
    return root


@pytest.fixture
def log_messages():
    """Collect loguru output as 'LEVEL|message' strings"""
    messages = []
    handler_id = logger.add(
        lambda m: messages.append(m.record["level"].name + "|" + m.record["message"]),
        level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
