"""
AgentFund escrow contract ABI.

Human-readable signatures:
    createProject(address agent, uint256[] milestoneAmounts) payable
        returns (uint256)
    releaseMilestone(uint256 projectId)
    cancelProject(uint256 projectId)
    getProject(uint256 projectId) view returns (tuple(address funder,
        address agent, uint256 totalAmount, uint256 releasedAmount,
        uint256 currentMilestone, uint256 totalMilestones, uint8 status))
    projectCount() view returns (uint256)
"""

CREATE_PROJECT_SIGNATURE = "createProject(address,uint256[])"
RELEASE_MILESTONE_SIGNATURE = "releaseMilestone(uint256)"
CANCEL_PROJECT_SIGNATURE = "cancelProject(uint256)"
GET_PROJECT_SIGNATURE = "getProject(uint256)"
PROJECT_COUNT_SIGNATURE = "projectCount()"

_PROJECT_ID_INPUT = {"name": "projectId", "type": "uint256", "internalType": "uint256"}

ESCROW_ABI = [
    {
        "type": "function",
        "name": "createProject",
        "stateMutability": "payable",
        "inputs": [
            {"name": "agent", "type": "address", "internalType": "address"},
            {
                "name": "milestoneAmounts",
                "type": "uint256[]",
                "internalType": "uint256[]",
            },
        ],
        "outputs": [{"name": "", "type": "uint256", "internalType": "uint256"}],
    },
    {
        "type": "function",
        "name": "releaseMilestone",
        "stateMutability": "nonpayable",
        "inputs": [_PROJECT_ID_INPUT],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "cancelProject",
        "stateMutability": "nonpayable",
        "inputs": [_PROJECT_ID_INPUT],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "getProject",
        "stateMutability": "view",
        "inputs": [_PROJECT_ID_INPUT],
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "internalType": "struct AgentFund.Project",
                "components": [
                    {"name": "funder", "type": "address", "internalType": "address"},
                    {"name": "agent", "type": "address", "internalType": "address"},
                    {
                        "name": "totalAmount",
                        "type": "uint256",
                        "internalType": "uint256",
                    },
                    {
                        "name": "releasedAmount",
                        "type": "uint256",
                        "internalType": "uint256",
                    },
                    {
                        "name": "currentMilestone",
                        "type": "uint256",
                        "internalType": "uint256",
                    },
                    {
                        "name": "totalMilestones",
                        "type": "uint256",
                        "internalType": "uint256",
                    },
                    {"name": "status", "type": "uint8", "internalType": "uint8"},
                ],
            }
        ],
    },
    {
        "type": "function",
        "name": "projectCount",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256", "internalType": "uint256"}],
    },
]
