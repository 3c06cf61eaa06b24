"""
Unit tests for data models and DTOs.
"""

import pytest
from pydantic import ValidationError
from app.models.dto import Person, PersonResource
from app.models.errors import (
    ErrorDetail,
    ErrorKind,
    ErrorsResponse,
    IllegalArgumentError,
    InvalidBaseUriError
)
from app.models.page import Page, PageDescriptor
from app.models.resources import EmbeddedWrapper, Link, PagedResource, PageMetadata


@pytest.mark.unit
def test_error_detail_model():
    """Test ErrorDetail model."""
    error = ErrorDetail(
        kind=ErrorKind.NOT_FOUND,
        entity="Person",
        message="Person not found",
        reason="No person with the given ID exists"
    )

    assert error.kind == ErrorKind.NOT_FOUND
    assert error.entity == "Person"
    assert error.message == "Person not found"


@pytest.mark.unit
def test_errors_response_model():
    """Test ErrorsResponse model."""
    error1 = ErrorDetail(kind=ErrorKind.NOT_FOUND, entity="Person", message="Not found")
    error2 = ErrorDetail(kind=ErrorKind.INVALID_PARAMETERS, parameters=["page"], message="Invalid parameter")

    errors_response = ErrorsResponse(errors=[error1, error2])

    assert len(errors_response.errors) == 2
    assert errors_response.errors[0].kind == ErrorKind.NOT_FOUND
    assert errors_response.errors[1].kind == ErrorKind.INVALID_PARAMETERS


@pytest.mark.unit
def test_invalid_base_uri_error_detail():
    """Test InvalidBaseUriError conversion to an error detail."""
    detail = InvalidBaseUriError("foo/bar").to_error_detail()

    assert detail.kind == "InvalidBaseUri"
    assert detail.uri == "foo/bar"
    assert "not an absolute URI" in detail.message


@pytest.mark.unit
def test_illegal_argument_error_is_value_error():
    """Test IllegalArgumentError can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise IllegalArgumentError("bad")


@pytest.mark.unit
@pytest.mark.parametrize("total,size,pages", [
    (3, 1, 3),
    (10, 5, 2),
    (11, 5, 3),
    (0, 20, 0),
    (0, 0, 1),
    (7, 0, 1),
])
def test_page_descriptor_total_pages(total, size, pages):
    """Test total page calculation."""
    descriptor = PageDescriptor(page_index=0, page_size=size, total_elements=total)

    assert descriptor.total_pages == pages


@pytest.mark.unit
def test_page_descriptor_navigation():
    """Test previous/next flags, including an index past the last page."""
    middle = PageDescriptor(page_index=1, page_size=1, total_elements=3)
    last = PageDescriptor(page_index=2, page_size=1, total_elements=3)
    beyond = PageDescriptor(page_index=9, page_size=1, total_elements=3)

    assert middle.has_previous and middle.has_next
    assert last.has_previous and not last.has_next
    assert beyond.is_last and not beyond.has_next
    assert middle.offset == 1


@pytest.mark.unit
def test_page_descriptor_is_immutable():
    """Test that descriptors cannot be changed after construction."""
    descriptor = PageDescriptor(page_index=0, page_size=10, total_elements=5)

    with pytest.raises(ValidationError):
        descriptor.page_index = 1


@pytest.mark.unit
def test_page_descriptor_rejects_negative_index():
    """Test that negative page indices are rejected."""
    with pytest.raises(ValidationError):
        PageDescriptor(page_index=-1, page_size=10, total_elements=5)


@pytest.mark.unit
def test_page_of_corrects_total_from_short_last_page():
    """Test that a short last page reveals the real total."""
    page = Page.of(["a"], page_index=2, page_size=5, total_elements=12)

    assert page.total_elements == 11
    assert page.total_pages == 3


@pytest.mark.unit
def test_page_of_keeps_total_for_full_window():
    """Test that the reported total is kept when the window fits."""
    page = Page.of(["a"], page_index=1, page_size=1, total_elements=3)

    assert page.total_elements == 3
    assert page.content == ("a",)


@pytest.mark.unit
def test_link_rel_copies():
    """Test relation changes leave the original link untouched."""
    link = Link(href="http://foo:9090", rel="rel", title="Foo")

    self_link = link.with_self_rel()

    assert self_link == Link(href="http://foo:9090", rel="self", title="Foo")
    assert link.rel == "rel"


@pytest.mark.unit
def test_link_expand_removes_template_variables():
    """Test expanding a templated link."""
    link = Link(href="http://localhost/people{?page,size}", rel="self")

    assert link.is_templated
    assert link.expand().href == "http://localhost/people"
    assert not link.expand().is_templated


@pytest.mark.unit
def test_page_metadata_serializes_camel_case():
    """Test PageMetadata serialization aliases."""
    metadata = PageMetadata(size=1, number=2, total_elements=3, total_pages=3)

    assert metadata.model_dump(by_alias=True) == {
        "size": 1,
        "number": 2,
        "totalElements": 3,
        "totalPages": 3
    }


@pytest.mark.unit
def test_embedded_wrapper_rel():
    """Test the collection relation derived from the element type."""
    assert EmbeddedWrapper(rel_target_type=Person).rel == "personList"


@pytest.mark.unit
def test_get_required_link_missing():
    """Test that a missing required link is an IllegalArgumentError."""
    resource = PagedResource.of([], PageMetadata(size=1, number=0, total_elements=0, total_pages=1))

    assert resource.get_link("next") is None
    with pytest.raises(IllegalArgumentError):
        resource.get_required_link("next")


@pytest.mark.unit
def test_paged_resource_to_hal():
    """Test HAL rendering of content, links and page metadata."""
    person = PersonResource(id="p-1", name="Dave")
    person.add(Link(href="http://localhost/api/v1/people/p-1"))
    resource = PagedResource.of([person], PageMetadata(size=1, number=0, total_elements=1, total_pages=1))
    resource.add(Link(href="http://localhost/api/v1/people?page=0&size=1", rel="self"))

    hal = resource.to_hal()

    assert hal["_embedded"] == {
        "personResourceList": [{
            "id": "p-1",
            "name": "Dave",
            "_links": {"self": {"href": "http://localhost/api/v1/people/p-1"}}
        }]
    }
    assert hal["_links"] == {"self": {"href": "http://localhost/api/v1/people?page=0&size=1"}}
    assert hal["page"]["totalPages"] == 1


@pytest.mark.unit
def test_paged_resource_to_hal_empty_collection():
    """Test HAL rendering of an embedded-type placeholder."""
    resource = PagedResource.of(
        [EmbeddedWrapper(rel_target_type=Person)],
        PageMetadata(size=20, number=0, total_elements=0, total_pages=0)
    )

    assert resource.to_hal()["_embedded"] == {"personList": []}
    assert resource.to_hal(collection_rel="people")["_embedded"] == {"people": []}
