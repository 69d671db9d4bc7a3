"""Tests for Accept header negotiation."""

import pytest

from linkbuilder.core.services.negotiation import accepts_hateoas


class TestAcceptsHateoas:
    """Tests for accepts_hateoas."""

    @pytest.mark.parametrize(
        "header",
        [
            "application/hateoas+json",
            "text/html, application/hateoas+json",
            "application/json, hateoas",
            "application/vnd.api.HATEOAS+json",
            "  application/Hateoas+json ; q=0.9",
        ],
    )
    def test_requested(self, header: str) -> None:
        """Test headers naming hateoas in a media type."""
        assert accepts_hateoas(header) is True

    @pytest.mark.parametrize(
        "header",
        [
            "application/json",
            "",
            "   ",
            None,
            "text/html, application/xml;q=0.9",
        ],
    )
    def test_not_requested(self, header: str | None) -> None:
        """Test headers without the hateoas token."""
        assert accepts_hateoas(header) is False

    def test_flag_parameter(self) -> None:
        """Test a hateoas parameter on a vendor media type."""
        assert accepts_hateoas("application/json; hateoas=true") is True
        assert accepts_hateoas("application/vnd.api+json; hateoas=true") is True
        assert accepts_hateoas("application/json; HATEOAS") is True

    def test_other_parameters_are_ignored(self) -> None:
        """Test that only the media type and a hateoas flag count."""
        assert accepts_hateoas("application/json; profile=hateoas") is False
        assert accepts_hateoas("application/json; hateoas=false") is False
        assert accepts_hateoas("application/json; q=0.9; charset=utf-8") is False

    def test_malformed_header_does_not_raise(self) -> None:
        """Test garbage input is treated as not requested."""
        assert accepts_hateoas(",,;;,") is False
        assert accepts_hateoas("=;=") is False
