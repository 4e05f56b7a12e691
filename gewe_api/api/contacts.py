"""联系人模块 API"""
from enum import IntEnum
from typing import Any, Iterable, List, Optional, Union

from ..client import GeweClient
from ..user import Wxid


class ContactOperationType(IntEnum):
    """手机通讯录操作类型"""

    ADD = 1
    REMOVE = 2


WxidLike = Union[Wxid, str]


def _wxid_list(wxids: Iterable[WxidLike]) -> List[str]:
    if isinstance(wxids, (str, Wxid)):
        raise TypeError(f"wxids 应为 wxid 列表，收到单个值：{wxids!r}")
    values = [str(Wxid.parse(wxid)) for wxid in wxids]
    if not values:
        raise ValueError("wxids 不能为空")
    return values


async def fetch_contacts_list(client: GeweClient, app_id: str) -> Any:
    """
    获取通讯录列表

    POST /contacts/fetchContactsList

    本接口为长耗时接口，能用缓存版本 fetch_contacts_list_cache 时尽量使用缓存版本。

    Args:
        client: 网关客户端
        app_id: 设备 appId

    Returns:
        网关返回的原始 JSON
    """
    params = {"appId": app_id}
    return await client.post_json("/contacts/fetchContactsList", params)


async def fetch_contacts_list_cache(client: GeweClient, app_id: str) -> Any:
    """
    获取通讯录列表（缓存）

    POST /contacts/fetchContactsListCache

    缓存由网关维护，有效期 10 分钟。
    """
    params = {"appId": app_id}
    return await client.post_json("/contacts/fetchContactsListCache", params)


async def search_friend(client: GeweClient, app_id: str, keyword: str) -> Any:
    """
    搜索好友

    POST /contacts/search

    Args:
        client: 网关客户端
        app_id: 设备 appId
        keyword: 搜索关键字（手机号、微信号等）

    Returns:
        网关返回的原始 JSON
    """
    params = {
        "appId": app_id,
        "contactsInfo": keyword,
    }
    return await client.post_json("/contacts/search", params)


async def add_contacts(
    client: GeweClient,
    app_id: str,
    scene: int,
    option: int,
    v3: str,
    v4: str,
    content: str,
) -> Any:
    """
    添加联系人 / 同意添加好友

    POST /contacts/addContacts

    Args:
        client: 网关客户端
        app_id: 设备 appId
        scene: 添加来源（搜索结果或好友请求回调中给出）
        option: 操作类型（2 添加好友，3 同意好友，4 拒绝好友）
        v3: 搜索结果或好友请求中的 v3
        v4: 搜索结果或好友请求中的 v4
        content: 打招呼内容
    """
    params = {
        "appId": app_id,
        "scene": scene,
        "option": option,
        "v3": v3,
        "v4": v4,
        "content": content,
    }
    return await client.post_json("/contacts/addContacts", params)


search_add = add_contacts


async def delete_friend(client: GeweClient, app_id: str, wxid: WxidLike) -> Any:
    """
    删除好友

    POST /contacts/deleteFriend
    """
    params = {
        "appId": app_id,
        "wxid": str(Wxid.parse(wxid)),
    }
    return await client.post_json("/contacts/deleteFriend", params)


async def upload_phone_contacts(
    client: GeweClient,
    app_id: str,
    phones: List[str],
    op: ContactOperationType,
) -> Any:
    """
    上传手机通讯录

    POST /contacts/uploadPhoneAddressList

    Args:
        client: 网关客户端
        app_id: 设备 appId
        phones: 手机号列表
        op: 操作类型，ContactOperationType.ADD 或 ContactOperationType.REMOVE
    """
    params = {
        "appId": app_id,
        "phones": list(phones),
        "opType": int(op),
    }
    return await client.post_json("/contacts/uploadPhoneAddressList", params)


async def get_phone_address_list(
    client: GeweClient,
    app_id: str,
    phones: Optional[List[str]] = None,
) -> Any:
    """
    获取手机通讯录

    POST /contacts/getPhoneAddressList

    phones 为空时返回全部已上传的手机号。
    """
    params = {"appId": app_id}
    if phones is not None:
        params["phones"] = list(phones)
    return await client.post_json("/contacts/getPhoneAddressList", params)


async def set_friend_only_chat(client: GeweClient, app_id: str, wxid: WxidLike, only_chat: bool) -> Any:
    """
    设置好友仅聊天

    POST /contacts/setFriendPermissions

    Args:
        client: 网关客户端
        app_id: 设备 appId
        wxid: 好友 wxid
        only_chat: True 为仅聊天，False 为恢复朋友圈等权限
    """
    params = {
        "appId": app_id,
        "wxid": str(Wxid.parse(wxid)),
        "onlyChat": only_chat,
    }
    return await client.post_json("/contacts/setFriendPermissions", params)


async def set_friend_remark(client: GeweClient, app_id: str, wxid: WxidLike, remark: str) -> Any:
    """设置好友备注"""
    params = {
        "appId": app_id,
        "wxid": str(Wxid.parse(wxid)),
        "remark": remark,
    }
    return await client.post_json("/contacts/setFriendRemark", params)


async def get_brief_single(client: GeweClient, app_id: str, wxid: WxidLike) -> Any:
    """
    获取单个联系人简要信息

    POST /contacts/getBriefInfo
    """
    return await get_brief_list(client, app_id, [wxid])


async def get_brief_list(client: GeweClient, app_id: str, wxids: Iterable[WxidLike]) -> Any:
    """
    批量获取联系人简要信息

    POST /contacts/getBriefInfo

    Args:
        client: 网关客户端
        app_id: 设备 appId
        wxids: 联系人 wxid 列表（网关限制 1-100 个）

    Returns:
        网关返回的原始 JSON

    Raises:
        InvalidWxidError: 列表中有格式不合法的 wxid
        TypeError: 传入的是单个 wxid 而不是列表
        ValueError: 列表为空
    """
    params = {
        "appId": app_id,
        "wxids": _wxid_list(wxids),
    }
    return await client.post_json("/contacts/getBriefInfo", params)


async def get_detail_list(client: GeweClient, app_id: str, wxids: Iterable[WxidLike]) -> Any:
    """
    批量获取联系人详细信息

    POST /contacts/getDetailInfo

    网关限制每次 1-20 个 wxid，空列表直接抛出 ValueError。
    """
    params = {
        "appId": app_id,
        "wxids": _wxid_list(wxids),
    }
    return await client.post_json("/contacts/getDetailInfo", params)
