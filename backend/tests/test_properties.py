"""
Property-based tests with Hypothesis for paging and patching invariants.
"""

import math

import pytest
from hypothesis import given, settings, strategies as st
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from reservation_api.models import Base, Customer
from reservation_api.repositories import (
    CustomerFilters,
    PaginationMetaData,
    RepositoryFilters,
    get_customer_repository,
)
from reservation_api.schemas import CustomerUpdate
from reservation_api.services.patching import UpdateView, apply_operations, validate_view
from reservation_shared.config.constants import Limits
from reservation_shared.utils.exceptions import ValidationError
from reservation_shared.utils.schemas import PatchOperation


names = st.text(
    alphabet=st.characters(min_codepoint=0x41, max_codepoint=0x7A),
    min_size=1,
    max_size=50,
)


class TestPagingProperties:
    @given(page_number=st.integers(), page_size=st.integers())
    @settings(max_examples=200)
    def test_filters_always_bounded(self, page_number, page_size):
        """Property: any requested page maps to a bounded, non-negative window."""
        filters = RepositoryFilters(page_number=page_number, page_size=page_size)

        assert filters.page_number >= 1
        assert Limits.MIN_PAGE_SIZE <= filters.page_size <= Limits.MAX_PAGE_SIZE
        assert filters.offset >= 0
        assert filters.offset <= Limits.MAX_ID

    @given(search=st.text(max_size=300))
    @settings(max_examples=100)
    def test_search_term_bounded(self, search):
        filters = RepositoryFilters(search=search)
        assert filters.search is None or 0 < len(filters.search) <= Limits.MAX_SEARCH_TERM_LENGTH

    @given(
        total=st.integers(min_value=0, max_value=10_000),
        page_size=st.integers(min_value=1, max_value=Limits.MAX_PAGE_SIZE),
    )
    @settings(max_examples=100)
    def test_total_pages_covers_total_count(self, total, page_size):
        meta = PaginationMetaData.from_filters(RepositoryFilters(page_size=page_size), total)

        assert meta.total_pages == math.ceil(total / page_size)
        assert meta.total_pages * page_size >= total
        if total:
            assert (meta.total_pages - 1) * page_size < total

    @given(
        count=st.integers(min_value=0, max_value=30),
        page_size=st.integers(min_value=1, max_value=Limits.MAX_PAGE_SIZE),
    )
    @settings(max_examples=20, deadline=None)
    def test_pages_partition_the_collection(self, count, page_size):
        """Property: walking every page yields each row exactly once, in id order."""
        engine = create_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(bind=engine)
        try:
            with Session(engine) as session:
                for i in range(count):
                    session.add(
                        Customer(
                            first_name=f"F{i}",
                            last_name=f"L{i}",
                            email=f"c{i}@example.com",
                            phone_number=str(i),
                        )
                    )
                session.commit()

                repo = get_customer_repository(session)
                _, meta = repo.get_all(CustomerFilters(page_size=page_size))
                seen = []
                for page_number in range(1, meta.total_pages + 1):
                    page, _ = repo.get_all(
                        CustomerFilters(page_number=page_number, page_size=page_size)
                    )
                    assert len(page) <= page_size
                    seen.extend(c.id for c in page)

                assert seen == sorted(seen)
                assert len(seen) == len(set(seen)) == count
        finally:
            engine.dispose()


class TestPatchProperties:
    def _view(self) -> UpdateView:
        return UpdateView.of(CustomerUpdate(first_name="Ana", last_name="Lopez"))

    @given(value=names)
    @settings(max_examples=100)
    def test_replace_then_test_holds(self, value):
        view = apply_operations(
            self._view(),
            [
                PatchOperation(op="replace", path="/firstName", value=value),
                PatchOperation(op="test", path="/firstName", value=value),
            ],
        )
        assert validate_view(view, CustomerUpdate).first_name == value

    @given(value=names)
    @settings(max_examples=50)
    def test_untouched_fields_survive(self, value):
        view = apply_operations(
            self._view(), [PatchOperation(op="replace", path="/lastName", value=value)]
        )
        assert view.values["firstName"] == "Ana"

    @given(field=st.sampled_from(["/firstName", "/lastName", "/FirstName", "/LASTNAME"]))
    def test_remove_of_required_field_never_validates(self, field):
        view = apply_operations(self._view(), [PatchOperation(op="remove", path=field)])
        with pytest.raises(ValidationError):
            validate_view(view, CustomerUpdate)
