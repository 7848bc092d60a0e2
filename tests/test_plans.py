"""
Deployment Plan Tests
"""

import pytest

from deployment.exceptions import PlanError
from deployment.plans import (
    DEPLOYER,
    IDENTITY_PLAN,
    MARKETPLACE_PLAN,
    AddressOf,
    ContractStep,
    DeploymentPlan,
    WiringCall,
    get_plan,
    resolve_args,
)


class TestBuiltinPlans:
    """Test the contract order of the shipped plans"""

    def test_marketplace_order(self):
        assert MARKETPLACE_PLAN.contract_names == [
            "Deployer",
            "ServiceBase",
            "AccessTokenBase",
            "RouterFactory",
            "Identity",
            "FixedRateExchange",
            "Factory",
        ]

    def test_marketplace_output(self):
        assert MARKETPLACE_PLAN.output_file == "contractAddresses.json"
        assert MARKETPLACE_PLAN.section == "addresses"

    def test_marketplace_wiring_registers_factory_and_exchange(self):
        signatures = [(call.target, call.signature) for call in MARKETPLACE_PLAN.wiring]
        assert signatures == [
            ("RouterFactory", "addFactoryAddress(address)"),
            ("RouterFactory", "addFixedRateAddress(address)"),
        ]

    def test_router_factory_takes_deployer(self):
        step = MARKETPLACE_PLAN.steps[MARKETPLACE_PLAN.contract_names.index("RouterFactory")]
        assert step.args == (DEPLOYER,)

    def test_identity_plan(self):
        assert IDENTITY_PLAN.contract_names == ["IDentity"]
        assert IDENTITY_PLAN.output_file == "IDentity_address.json"
        assert IDENTITY_PLAN.section is None

    def test_builtin_plans_are_valid(self):
        MARKETPLACE_PLAN.validate()
        IDENTITY_PLAN.validate()

    def test_get_plan(self):
        assert get_plan("marketplace") is MARKETPLACE_PLAN
        assert get_plan("identity") is IDENTITY_PLAN

    def test_get_unknown_plan(self):
        with pytest.raises(PlanError):
            get_plan("tokens")


class TestPlanValidation:
    """Test rejection of inconsistent plans"""

    def test_empty_plan(self):
        with pytest.raises(PlanError):
            DeploymentPlan(name="empty", steps=[], output_file="x.json").validate()

    def test_duplicate_contract(self):
        plan = DeploymentPlan(
            name="dup",
            steps=[ContractStep("Token"), ContractStep("Token")],
            output_file="x.json",
        )
        with pytest.raises(PlanError) as exc_info:
            plan.validate()
        assert "twice" in str(exc_info.value)

    def test_forward_reference(self):
        plan = DeploymentPlan(
            name="forward",
            steps=[
                ContractStep("Exchange", (AddressOf("Token"),)),
                ContractStep("Token"),
            ],
            output_file="x.json",
        )
        with pytest.raises(PlanError) as exc_info:
            plan.validate()
        assert "Token" in str(exc_info.value)

    def test_wiring_unknown_target(self):
        plan = DeploymentPlan(
            name="wiring",
            steps=[ContractStep("Token")],
            output_file="x.json",
            wiring=[WiringCall("Router", "setToken(address)", (AddressOf("Token"),))],
        )
        with pytest.raises(PlanError):
            plan.validate()

    def test_wiring_unknown_argument(self):
        plan = DeploymentPlan(
            name="wiring",
            steps=[ContractStep("Router")],
            output_file="x.json",
            wiring=[WiringCall("Router", "setToken(address)", (AddressOf("Token"),))],
        )
        with pytest.raises(PlanError):
            plan.validate()


class TestResolveArgs:
    """Test placeholder substitution"""

    def test_literals_pass_through(self, dev_account):
        assert resolve_args((1, "name", True), {}, dev_account[1]) == [1, "name", True]

    def test_deployer_placeholder(self, dev_account):
        assert resolve_args((DEPLOYER,), {}, dev_account[1]) == [dev_account[1]]

    def test_address_placeholders_keep_order(self, dev_account):
        addresses = {"A": "0x" + "11" * 20, "B": "0x" + "22" * 20}

        resolved = resolve_args((AddressOf("B"), AddressOf("A"), 5), addresses, dev_account[1])

        assert resolved == ["0x" + "22" * 20, "0x" + "11" * 20, 5]

    def test_unknown_address(self, dev_account):
        with pytest.raises(PlanError):
            resolve_args((AddressOf("Missing"),), {}, dev_account[1])
