"""Tests for the structural pattern demos."""
import pytest

from design_patterns.exceptions import (
    BridgeNotConnectedError,
    NoCopiesAvailableError,
    UnknownCharacterError,
    UnsupportedOperationError,
)
from design_patterns.structural.adapter import ChemicalDatabank, Compound, RichCompound
from design_patterns.structural.bridge import Customers, CustomersData
from design_patterns.structural.composite import CompositeElement, PrimitiveElement
from design_patterns.structural.decorator import Book, Borrowable, Video
from design_patterns.structural.facade import Customer, Mortgage
from design_patterns.structural.flyweight import CharacterFactory
from design_patterns.structural.proxy import MathProxy


class TestAdapter:
    """Test the compound adapter over the chemical databank."""

    def test_rich_compound_is_filled_from_bank(self):
        water = RichCompound("Water")

        assert water.molecular_formula == "H20"
        assert water.boiling_point == 100.0
        assert water.melting_point == 0.0

    def test_lookup_is_case_insensitive(self):
        bank = ChemicalDatabank()
        assert bank.get_molecular_weight("BENZENE") == bank.get_molecular_weight("benzene")

    def test_unknown_compound_defaults(self):
        unknown = RichCompound("Unobtainium")

        assert unknown.molecular_formula == ""
        assert unknown.molecular_weight == 0.0

    def test_plain_compound_display(self):
        assert Compound("Unknown").display() == ["", "Compound: Unknown:"]

    def test_adapter_with_injected_bank(self):
        class FakeBank(ChemicalDatabank):
            def get_molecular_structure(self, compound):
                return "XYZ"

        assert RichCompound("Water", FakeBank()).molecular_formula == "XYZ"

    def test_demo_output(self, run_demo):
        lines = run_demo("adapter")

        assert lines[:2] == ["", "Compound: Unknown:"]
        assert "Compound: Ethanol:" in lines
        assert "   Melting Pt: -114.1" in lines

    def test_whole_values_display_without_fraction(self):
        lines = RichCompound("Water").display()

        assert "   Melting Pt: 0" in lines
        assert "   Boiling Pt: 100" in lines


class TestBridge:
    """Test the customer abstraction over a data object."""

    def test_navigation_is_bounded(self):
        customers = Customers("Chicago", CustomersData(["A", "B"]))

        customers.prior()
        assert customers.show() == "A"
        customers.next()
        customers.next()
        assert customers.show() == "B"

    def test_delete_keeps_cursor_valid(self):
        customers = Customers("Chicago", CustomersData(["A", "B"]))
        customers.next()
        customers.delete("B")

        assert customers.show() == "A"

    def test_empty_data(self):
        customers = Customers("Empty", CustomersData([]))
        assert customers.show() == ""

    def test_unconnected_abstraction_raises(self):
        with pytest.raises(BridgeNotConnectedError):
            Customers("Chicago").show()

    def test_implementation_can_be_swapped(self):
        customers = Customers("Chicago", CustomersData(["A"]))
        customers.data = CustomersData(["Z"])
        assert customers.show() == "Z"

    def test_demo_output(self, run_demo):
        lines = run_demo("bridge")

        assert lines[:3] == ["Jim Jones", "Samual Jackson", "Allen Good"]
        assert "Customer Group: Chicago" in lines
        assert lines[-2] == "Henry Velasquez"
        assert lines[-1] == "------------------------"


class TestComposite:
    """Test the drawing element tree."""

    def test_nested_display(self):
        root = CompositeElement("Picture")
        group = CompositeElement("Group")
        group.add(PrimitiveElement("Dot"))
        root.add(group)

        assert root.display(1) == ["-+ Picture", "---+ Group", "----- Dot"]

    def test_remove(self):
        root = CompositeElement("Picture")
        line = PrimitiveElement("Line")
        root.add(line)
        root.remove(line)
        assert root.children == []

    def test_leaf_rejects_children(self):
        leaf = PrimitiveElement("Line")
        with pytest.raises(UnsupportedOperationError):
            leaf.add(PrimitiveElement("Other"))
        with pytest.raises(UnsupportedOperationError):
            leaf.remove(PrimitiveElement("Other"))

    def test_demo_output(self, run_demo):
        assert run_demo("composite") == [
            "-+ Picture",
            "--- Red Line",
            "--- Blue Circle",
            "--- Green Box",
            "---+ Two Circles",
            "----- Black Circle",
            "----- White Circle",
        ]


class TestDecorator:
    """Test the borrowable decorator."""

    def test_borrow_updates_wrapped_item(self):
        video = Video("Spielberg", "Jaws", 2, 92)
        borrowable = Borrowable(video)

        borrowable.borrow_item("Customer #1")

        assert video.num_copies == 1
        assert borrowable.borrowers == ["Customer #1"]

    def test_return_item(self):
        borrowable = Borrowable(Book("Worley", "Inside ASP.NET", 1))
        borrowable.borrow_item("Customer #1")
        borrowable.return_item("Customer #1")

        assert borrowable.num_copies == 1
        assert borrowable.borrowers == []

    def test_return_unknown_borrower(self):
        with pytest.raises(ValueError):
            Borrowable(Book("Worley", "Inside ASP.NET", 1)).return_item("Nobody")

    def test_no_copies_left(self):
        borrowable = Borrowable(Book("Worley", "Inside ASP.NET", 1))
        borrowable.borrow_item("Customer #1")

        with pytest.raises(NoCopiesAvailableError):
            borrowable.borrow_item("Customer #2")

    def test_display_appends_borrowers(self):
        borrowable = Borrowable(Book("Worley", "Inside ASP.NET", 10))
        borrowable.borrow_item("Customer #1")

        lines = borrowable.display()

        assert "   # Copies: 9" in lines
        assert lines[-1] == "   borrower: Customer #1"

    def test_demo_output(self, run_demo):
        lines = run_demo("decorator")

        assert "   # Copies: 21" in lines
        assert lines[-2:] == ["   borrower: Customer #1", "   borrower: Customer #2"]


class TestFacade:
    """Test the mortgage facade."""

    def test_default_customer_is_approved(self):
        eligible, trace = Mortgage().is_eligible(Customer("Ann McKinsey"), 125000)

        assert eligible is True
        assert trace[0] == "Ann McKinsey applies for $125,000.00 loan"
        assert trace[2:] == [
            "Check bank for Ann McKinsey",
            "Check loans for Ann McKinsey",
            "Check credit for Ann McKinsey",
        ]

    @pytest.mark.parametrize(
        "customer",
        [
            Customer("Low Savings", savings=100.0),
            Customer("Bad Credit", credit_score=500),
            Customer("Bad Loans", bad_loans=1),
        ],
    )
    def test_rejections(self, customer):
        eligible, _ = Mortgage().is_eligible(customer, 125000)
        assert eligible is False

    def test_demo_output(self, run_demo):
        assert run_demo("facade")[-1] == "Ann McKinsey has been Approved"


class TestFlyweight:
    """Test shared character flyweights."""

    def test_characters_are_shared(self):
        factory = CharacterFactory()

        assert factory.get_character("A") is factory.get_character("A")
        factory.get_character("Z")
        assert len(factory) == 2

    def test_unknown_character(self):
        with pytest.raises(UnknownCharacterError):
            CharacterFactory().get_character("Q")

    def test_demo_output(self, run_demo):
        lines = run_demo("flyweight")

        assert lines[0] == "A (pointsize 11)"
        assert lines[-1] == "B (pointsize 18)"
        assert len(lines) == 8


class TestProxy:
    """Test the lazy math proxy."""

    def test_real_subject_created_on_first_call(self):
        proxy = MathProxy()
        assert not proxy.is_connected

        assert proxy.mul(4, 2) == 8
        assert proxy.is_connected
        assert proxy.calls == 1

    def test_division_by_zero_propagates(self):
        with pytest.raises(ZeroDivisionError):
            MathProxy().div(1, 0)

    def test_demo_output(self, run_demo):
        assert run_demo("proxy") == ["4 + 2 = 6", "4 - 2 = 2", "4 * 2 = 8", "4 / 2 = 2"]
