"""
Dependency Injection Container for Mecene.

Owns the web3 client and wires readers, encoders and use cases. The
caller constructs the container, uses it, and closes it; there is no
process-global client.
"""

from typing import Optional

from web3 import AsyncWeb3

from mecene.application.use_cases.check_milestone_status import (
    CheckMilestoneStatus,
)
from mecene.application.use_cases.find_agent_projects import FindAgentProjects
from mecene.application.use_cases.get_platform_stats import GetPlatformStats
from mecene.application.use_cases.get_project_details import GetProjectDetails
from mecene.application.use_cases.prepare_funding_proposal import (
    PrepareFundingProposal,
)
from mecene.application.use_cases.prepare_milestone_release import (
    PrepareMilestoneRelease,
)
from mecene.application.use_cases.prepare_project_cancellation import (
    PrepareProjectCancellation,
)
from mecene.config.settings import Settings
from mecene.domain.services.i_escrow_call_encoder import IEscrowCallEncoder
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.value_objects.evm_address import EvmAddress
from mecene.infrastructure.blockchain.call_encoder import EscrowCallEncoder
from mecene.infrastructure.blockchain.escrow_contract_reader import (
    Web3EscrowReader,
    build_web3,
)
from mecene.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class Container:
    """
    Dependency Injection Container.

    Services are created lazily on first access. A reader or encoder can
    be passed in to replace the web3-backed defaults.
    """

    def __init__(
        self,
        settings: Settings,
        escrow_reader: Optional[IEscrowReader] = None,
        call_encoder: Optional[IEscrowCallEncoder] = None,
    ):
        """
        Initialize container.

        Args:
            settings: Deployment settings
            escrow_reader: Optional reader override
            call_encoder: Optional encoder override
        """
        self.settings = settings
        self._web3: Optional[AsyncWeb3] = None
        self._escrow_reader = escrow_reader
        self._call_encoder = call_encoder

    async def close(self) -> None:
        """Close the RPC transport if this container opened one."""
        if self._web3 is not None:
            await self._web3.provider.disconnect()
            self._web3 = None
            logger.debug("Closed RPC provider")

    async def __aenter__(self) -> "Container":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # Infrastructure Getters

    @property
    def contract_address(self) -> EvmAddress:
        """Escrow contract address."""
        return EvmAddress(self.settings.contract_address)

    @property
    def web3(self) -> AsyncWeb3:
        """Get web3 client instance."""
        if self._web3 is None:
            self._web3 = build_web3(
                self.settings.rpc_url, self.settings.rpc_timeout
            )
        return self._web3

    @property
    def escrow_reader(self) -> IEscrowReader:
        """Get escrow contract reader."""
        if self._escrow_reader is None:
            self._escrow_reader = Web3EscrowReader(
                web3=self.web3,
                contract_address=self.contract_address,
            )
        return self._escrow_reader

    @property
    def call_encoder(self) -> IEscrowCallEncoder:
        """Get escrow calldata encoder."""
        if self._call_encoder is None:
            self._call_encoder = EscrowCallEncoder()
        return self._call_encoder

    # Use Case Getters

    def get_platform_stats(self) -> GetPlatformStats:
        return GetPlatformStats(self.escrow_reader, self.settings)

    def get_project_details(self) -> GetProjectDetails:
        return GetProjectDetails(self.escrow_reader)

    def check_milestone_status(self) -> CheckMilestoneStatus:
        return CheckMilestoneStatus(self.escrow_reader)

    def find_agent_projects(self) -> FindAgentProjects:
        return FindAgentProjects(
            self.escrow_reader,
            scan_limit=self.settings.scan_limit,
        )

    def prepare_funding_proposal(self) -> PrepareFundingProposal:
        """Get funding proposal use case (no RPC access needed)."""
        return PrepareFundingProposal(self.call_encoder, self.contract_address)

    def prepare_milestone_release(self) -> PrepareMilestoneRelease:
        return PrepareMilestoneRelease(
            self.escrow_reader,
            self.call_encoder,
            self.contract_address,
        )

    def prepare_project_cancellation(self) -> PrepareProjectCancellation:
        return PrepareProjectCancellation(
            self.escrow_reader,
            self.call_encoder,
            self.contract_address,
        )
