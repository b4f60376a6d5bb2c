"""
Get Platform Stats use case.

Reports project count and deployment facts for the escrow contract.
"""

from mecene.application.dto.escrow_dto import PlatformStats
from mecene.config.settings import Settings
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.value_objects.evm_address import EvmAddress


class GetPlatformStats:
    """Read projectCount() and combine it with deployment settings."""

    def __init__(self, escrow_reader: IEscrowReader, settings: Settings):
        """
        Initialize use case with dependencies.

        Args:
            escrow_reader: Contract reader
            settings: Deployment settings (chain, fee, explorer)
        """
        self.escrow_reader = escrow_reader
        self.settings = settings

    async def execute(self) -> PlatformStats:
        """
        Get platform statistics.

        Returns:
            PlatformStats

        Raises:
            RPCError: If projectCount() fails
        """
        count = await self.escrow_reader.get_project_count()

        return PlatformStats(
            total_projects=count,
            contract_address=EvmAddress(self.settings.contract_address),
            chain=self.settings.chain_name,
            chain_id=self.settings.chain_id,
            platform_fee=self.settings.platform_fee,
            explorer_url=self.settings.contract_explorer_url,
        )
