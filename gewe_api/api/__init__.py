"""Gewe 网关 API"""
from .contacts import (
    ContactOperationType,
    add_contacts,
    delete_friend,
    fetch_contacts_list,
    fetch_contacts_list_cache,
    get_brief_list,
    get_brief_single,
    get_detail_list,
    get_phone_address_list,
    search_add,
    search_friend,
    set_friend_only_chat,
    set_friend_remark,
    upload_phone_contacts,
)

__all__ = [
    "ContactOperationType",
    "add_contacts",
    "delete_friend",
    "fetch_contacts_list",
    "fetch_contacts_list_cache",
    "get_brief_list",
    "get_brief_single",
    "get_detail_list",
    "get_phone_address_list",
    "search_add",
    "search_friend",
    "set_friend_only_chat",
    "set_friend_remark",
    "upload_phone_contacts",
]
