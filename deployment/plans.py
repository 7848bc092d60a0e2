"""
Deployment Plans
Ordered contract lists and post-deployment wiring for each script
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .exceptions import PlanError


@dataclass(frozen=True)
class AddressOf:
    """Constructor/call argument replaced by an earlier contract's address."""

    contract: str


class _DeployerAddress:
    """Argument replaced by the signing account's address."""

    def __repr__(self):
        return 'DEPLOYER'


DEPLOYER = _DeployerAddress()


@dataclass(frozen=True)
class ContractStep:
    name: str
    args: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class WiringCall:
    """Setter call on a deployed contract, e.g. registering a factory on the router."""

    target: str
    signature: str
    args: Tuple[Any, ...] = ()


@dataclass
class DeploymentPlan:
    """Everything one deployment script does."""

    name: str
    steps: List[ContractStep]
    output_file: str
    section: Optional[str] = None  # top-level key wrapping the address map
    wiring: List[WiringCall] = field(default_factory=list)

    @property
    def contract_names(self) -> List[str]:
        return [step.name for step in self.steps]

    def validate(self):
        """
        Check the plan can be executed in order

        Raises:
            PlanError: On empty plans, duplicate names, or references to
                contracts that are not deployed earlier
        """
        if not self.steps:
            raise PlanError(f"Plan '{self.name}' has no contracts")

        deployed = set()
        for step in self.steps:
            if step.name in deployed:
                raise PlanError(f"Plan '{self.name}' deploys {step.name} twice")
            for arg in step.args:
                if isinstance(arg, AddressOf) and arg.contract not in deployed:
                    raise PlanError(
                        f"{step.name} needs the address of {arg.contract}, "
                        f"which is not deployed before it in plan '{self.name}'"
                    )
            deployed.add(step.name)

        for call in self.wiring:
            if call.target not in deployed:
                raise PlanError(f"Wiring call {call.signature} targets unknown contract {call.target}")
            for arg in call.args:
                if isinstance(arg, AddressOf) and arg.contract not in deployed:
                    raise PlanError(
                        f"Wiring call {call.signature} references unknown contract {arg.contract}"
                    )


def resolve_args(args, addresses: Mapping[str, str], deployer: str) -> List[Any]:
    """
    Replace address placeholders with real addresses

    Args:
        args: Step or call arguments
        addresses: Contract name -> address deployed so far
        deployer: Signing account address

    Returns:
        List of concrete arguments
    """
    resolved = []
    for arg in args:
        if isinstance(arg, AddressOf):
            if arg.contract not in addresses:
                raise PlanError(f"Address of {arg.contract} is not known yet")
            resolved.append(addresses[arg.contract])
        elif arg is DEPLOYER:
            resolved.append(deployer)
        else:
            resolved.append(arg)
    return resolved


MARKETPLACE_PLAN = DeploymentPlan(
    name='marketplace',
    output_file='contractAddresses.json',
    section='addresses',
    steps=[
        ContractStep('Deployer'),
        ContractStep('ServiceBase'),
        ContractStep('AccessTokenBase'),
        ContractStep('RouterFactory', (DEPLOYER,)),
        ContractStep('Identity'),
        ContractStep('FixedRateExchange', (
            AddressOf('RouterFactory'),
            AddressOf('Identity'),
        )),
        ContractStep('Factory', (
            AddressOf('ServiceBase'),
            AddressOf('AccessTokenBase'),
            AddressOf('RouterFactory'),
            AddressOf('FixedRateExchange'),
            AddressOf('Identity'),
        )),
    ],
    wiring=[
        WiringCall('RouterFactory', 'addFactoryAddress(address)', (AddressOf('Factory'),)),
        WiringCall('RouterFactory', 'addFixedRateAddress(address)', (AddressOf('FixedRateExchange'),)),
    ],
)

IDENTITY_PLAN = DeploymentPlan(
    name='identity',
    output_file='IDentity_address.json',
    steps=[ContractStep('IDentity')],
)

PLANS: Dict[str, DeploymentPlan] = {
    MARKETPLACE_PLAN.name: MARKETPLACE_PLAN,
    IDENTITY_PLAN.name: IDENTITY_PLAN,
}


def get_plan(name: str) -> DeploymentPlan:
    """Look up a built-in plan by name"""
    if name not in PLANS:
        raise PlanError(f"Unknown deployment plan '{name}' (known: {', '.join(sorted(PLANS))})")
    return PLANS[name]
