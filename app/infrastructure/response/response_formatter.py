from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "OK",
) -> Dict[str, Any]:
    """
    Build the standard envelope

    Args:
        data: payload of any JSON type
        code: status code mirrored in the body, 200 on success
        msg: human readable message

    Returns:
        Dict[str, Any]: {"code": ..., "data": ..., "msg": ...}
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def error_response(
    msg: str = "Request failed",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """Envelope for an error; ``data`` optionally carries details."""
    return standard_response(data=data, code=code, msg=msg)


def not_found_response(entity: str = "Resource") -> Dict[str, Any]:
    """404 envelope naming the missing entity type."""
    return error_response(msg=f"{entity} not found", code=404)
