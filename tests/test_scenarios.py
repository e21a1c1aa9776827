"""Tests for the seed dataset scenario."""

from thoth_hr.models import MemberStatus, PayrollStatus, Snapshot
from thoth_hr.scenarios import SeedDatasetScenario
from thoth_hr.store import HrDataStore


class TestSeedDatasetScenario:
    """Tests for SeedDatasetScenario."""

    def test_snapshot_counts(self, seed: int) -> None:
        """Test collection sizes follow the parameters."""
        snapshot = SeedDatasetScenario(num_members=10, payroll_months=2, seed=seed).snapshot()

        active = [m for m in snapshot.members if m.status != MemberStatus.TERMINATED]
        assert isinstance(snapshot, Snapshot)
        assert len(snapshot.members) == 10
        assert len(snapshot.contracts) == 10
        assert len(snapshot.payrolls) == 2 * len(active)
        assert snapshot.users == ()

    def test_references_resolve(self, seed: int) -> None:
        """Test generated records only reference generated members."""
        snapshot = SeedDatasetScenario(num_members=15, seed=seed).snapshot()
        member_ids = {m.id for m in snapshot.members}

        for collection in (snapshot.loans, snapshot.savings, snapshot.payrolls, snapshot.contracts):
            assert {record.member_id for record in collection} <= member_ids
        assert {t.member_id for t in snapshot.transactions} <= member_ids | {None}

    def test_paid_payrolls_have_transactions(self, seed: int) -> None:
        """Test each paid payroll is mirrored in the ledger."""
        scenario = SeedDatasetScenario(num_members=8, num_expenses=3, seed=seed)
        snapshot = scenario.snapshot()

        paid = [p for p in snapshot.payrolls if p.status == PayrollStatus.PAID]
        expected = len(paid) + len(snapshot.loans) + 3
        assert len(snapshot.transactions) == expected

    def test_full_penetration(self, seed: int) -> None:
        """Test every member gets a loan and savings at rate 1."""
        snapshot = SeedDatasetScenario(
            num_members=5, payroll_months=2, loan_penetration=1.0, savings_rate=1.0, seed=seed
        ).snapshot()

        assert len(snapshot.loans) == 5
        assert len(snapshot.savings) == 10

    def test_reproducible(self, seed: int) -> None:
        """Test same seed, same dataset."""
        first = SeedDatasetScenario(num_members=5, seed=seed).snapshot()
        second = SeedDatasetScenario(num_members=5, seed=seed).snapshot()

        assert first == second

    def test_generate_store(self, seed: int) -> None:
        """Test generate returns a populated in-memory store."""
        store = SeedDatasetScenario(num_members=4, seed=seed).generate()

        assert isinstance(store, HrDataStore)
        assert store.summary()["members"] == 4
        assert store.repository.save_count == 0
