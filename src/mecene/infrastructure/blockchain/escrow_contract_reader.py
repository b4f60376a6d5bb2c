"""
Escrow contract reader over Ethereum JSON-RPC.

Issues view calls through web3.py. Contract-level failures (revert,
empty return data) become ProjectNotFoundError; transport failures and
undecodable responses are wrapped in RPCError without further classification. Nothing is retried.
"""

import asyncio
import time
from typing import Any

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception

from mecene.domain.entities.project import Project
from mecene.domain.exceptions import ProjectNotFoundError, RPCError
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.value_objects.evm_address import EvmAddress
from mecene.infrastructure.blockchain.escrow_abi import ESCROW_ABI
from mecene.infrastructure.monitoring.logger import get_logger, log_performance

logger = get_logger(__name__)

TRANSPORT_ERRORS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    ValueError,
    Web3Exception,
)


def build_web3(rpc_url: str, timeout: float) -> AsyncWeb3:
    """
    Create an async web3 client for an HTTP JSON-RPC endpoint.

    Args:
        rpc_url: JSON-RPC endpoint URL
        timeout: Total request timeout in seconds

    Returns:
        AsyncWeb3 instance (caller owns and must close the provider)
    """
    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
    )
    return AsyncWeb3(provider)


class Web3EscrowReader(IEscrowReader):
    """
    Read-only client for the escrow contract.

    Calls are awaited one at a time by the caller; this class keeps no
    state besides the contract binding.
    """

    def __init__(self, web3: AsyncWeb3, contract_address: EvmAddress):
        """
        Initialize escrow reader.

        Args:
            web3: AsyncWeb3 client bound to an RPC endpoint
            contract_address: Deployed escrow contract address
        """
        self.web3 = web3
        self.contract_address = contract_address
        self.contract = web3.eth.contract(
            address=contract_address.address,
            abi=ESCROW_ABI,
        )

    async def get_project_count(self) -> int:
        """Query projectCount()."""
        try:
            count = await self._call("projectCount")
        except (ContractLogicError, BadFunctionCallOutput) as e:
            raise RPCError("projectCount", str(e)) from e
        return int(count)

    async def get_project(self, project_id: int) -> Project:
        """Query getProject(projectId)."""
        try:
            raw = await self._call("getProject", project_id)
        except (ContractLogicError, BadFunctionCallOutput) as e:
            raise ProjectNotFoundError(project_id, str(e)) from e

        project = Project.from_chain_tuple(project_id, raw)
        if project.funder.is_zero:
            raise ProjectNotFoundError(project_id, "contract returned empty record")

        return project

    async def _call(self, function_name: str, *args: Any) -> Any:
        """
        Execute a view call.

        Raises:
            ContractLogicError: Re-raised for the caller to classify
            BadFunctionCallOutput: Re-raised for the caller to classify
            RPCError: On any transport failure
        """
        start_time = time.time()
        function = getattr(self.contract.functions, function_name)

        try:
            return await function(*args).call()
        except (ContractLogicError, BadFunctionCallOutput):
            raise
        except TRANSPORT_ERRORS as e:
            logger.warning(f"RPC call {function_name}{args} failed: {e}")
            raise RPCError(function_name, str(e)) from e
        finally:
            log_performance(logger, f"{function_name}{args}", start_time)
