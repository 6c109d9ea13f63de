import pytest

from podio_sdk.adapters.resources.contacts import ContactService
from podio_sdk.core.domain.models import Contact, ContactTotal
from podio_sdk.core.errors import InvalidArgumentError, MissingFieldError, TransportError


@pytest.fixture
def contacts(dispatcher) -> ContactService:
    return ContactService(dispatcher)


@pytest.mark.asyncio
async def test_create_contact_returns_profile_id(contacts, transport):
    transport.queue(200, {"profile_id": 42, "other": "x"})

    profile_id = await contacts.create_contact(3, Contact(name="Ann", mail=["ann@example.com"]))

    assert profile_id == 42
    assert transport.last.path == "/contact/space/3/"
    assert transport.last.body == {"name": "Ann", "mail": ["ann@example.com"]}


@pytest.mark.asyncio
async def test_create_contact_without_profile_id_fails(contacts, transport):
    transport.queue(200, {"other": "x"})

    with pytest.raises(MissingFieldError) as exc_info:
        await contacts.create_contact(3, Contact(name="Ann"))

    assert exc_info.value.field_name == "profile_id"


@pytest.mark.asyncio
async def test_delete_contacts_joins_ids_in_path(contacts, transport):
    transport.queue(204)

    await contacts.delete_contacts([3, 17, 9])

    assert transport.last.method == "DELETE"
    assert transport.last.path == "/contact/3,17,9"


@pytest.mark.asyncio
async def test_delete_contacts_requires_ids(contacts, transport):
    with pytest.raises(InvalidArgumentError):
        await contacts.delete_contacts([])

    assert transport.calls == []


@pytest.mark.asyncio
async def test_get_contacts_by_profile_id_always_returns_list(contacts, transport):
    transport.queue(200, {"profile_id": 1, "name": "Ann"})
    transport.queue(200, [{"profile_id": 1, "name": "Ann"}, {"profile_id": 2, "name": "Bob"}])

    single = await contacts.get_contacts_by_profile_id([1])
    assert [c.profile_id for c in single] == [1]
    assert transport.last.path == "/contact/1/v2"
    assert transport.last.query == {}

    many = await contacts.get_contacts_by_profile_id([1, 2], space_id=8)
    assert [c.profile_id for c in many] == [1, 2]
    assert transport.last.path == "/contact/1,2/v2"
    assert transport.last.query == {"space_id": "8"}


@pytest.mark.asyncio
async def test_get_all_contacts_merges_defaults_and_field_filters(contacts, transport):
    transport.queue(200, [])

    result = await contacts.get_all_contacts(fields={"mail": "ann@", "order": "created_on"}, offset=5)

    assert result == []
    assert transport.last.path == "/contact/"
    assert transport.last.query == {
        "contact_type": "user",
        "exclude_self": "true",
        "offset": "5",
        "order": "created_on",
        "type": "mini",
        "mail": "ann@",
    }


@pytest.mark.asyncio
async def test_space_and_org_contacts_use_their_paths(contacts, transport):
    transport.queue(200, [])
    transport.queue(200, [])
    transport.queue(200, [])

    await contacts.get_space_contacts(4, exclude_self=False, limit=10)
    assert transport.last.path == "/contact/space/4/"
    assert transport.last.query["exclude_self"] == "false"
    assert transport.last.query["limit"] == "10"

    await contacts.get_organization_contacts(6)
    assert transport.last.path == "/contact/org/6"

    await contacts.get_space_contacts_on_app(11, limit=None, offset=20)
    assert transport.last.path == "/contact/app/11/"
    assert transport.last.query == {"offset": "20", "order": "name"}


@pytest.mark.asyncio
async def test_get_skills_and_contact_field(contacts, transport):
    transport.queue(200, ["python", "sales"])
    transport.queue(200, ["ann@example.com"])

    assert await contacts.get_skills("py") == ["python", "sales"]
    assert transport.last.query == {"limit": "12", "text": "py"}

    assert await contacts.get_user_contact_field(2, "mail") == ["ann@example.com"]
    assert transport.last.path == "/contact/user/2/mail"


@pytest.mark.asyncio
async def test_totals(contacts, transport):
    transport.queue(200, {"user": {"count": 10}, "space": {"count": 3}})
    transport.queue(200, {"total": 3})

    totals = await contacts.get_contact_totals()
    assert isinstance(totals, ContactTotal)
    assert totals.user.count == 10

    assert await contacts.get_space_contact_totals(4) == 3


@pytest.mark.asyncio
async def test_get_vcard_returns_raw_text(contacts, transport):
    vcard = "BEGIN:VCARD\nVERSION:3.0\nFN:Ann\nEND:VCARD\n"
    transport.queue(200, text=vcard)

    assert await contacts.get_vcard(9) == vcard
    assert transport.last.path == "/contact/9/vcard"


@pytest.mark.asyncio
async def test_update_contact_field_sends_value(contacts, transport):
    transport.queue(204)

    await contacts.update_contact_field(9, "title", "CEO")

    assert transport.last.method == "PUT"
    assert transport.last.path == "/contact/9/title"
    assert transport.last.body == {"value": "CEO"}


@pytest.mark.asyncio
async def test_get_user_contact_not_found(contacts, transport):
    transport.queue(404, {"error": "not_found"})

    with pytest.raises(TransportError) as exc_info:
        await contacts.get_user_contact(99)

    assert exc_info.value.status_code == 404
