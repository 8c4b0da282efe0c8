#!/usr/bin/env python3

import json
from typing import Any


CONSOLE_HEADER = 'pending console output: '

MAX_CONTENT_PREVIEW = 512


class HyperionError(Exception):
    ...


class HyperionTransportError(HyperionError):
    '''
    The request never produced an http response (dns, refused connection,
    timeout), underlying library exception is chained as ``__cause__``.
    '''

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f'{method} {url} failed: {reason}')


class ChainAPIError(Exception):
    '''
    node api error, hyperion proxies these untouched on /v1/chain routes

    example:
    {
        "code": 3010001,
        "name": "name_type_exception",
        "what": "Invalid name",
        "details": [
            {
                "message": "Name should be less than 13 characters",
                "file": "name.cpp",
                "line_number": 15,
                "method": "set"
            }
        ]
    }
    '''

    def __init__(
        self,
        code: int,
        name: str,
        what: str,
        details: list[dict[str, Any]]
    ):
        self.code = code
        self.name = name
        self.what = what
        self.details = details

        msg = f'{code}: {what}'

        self.messages: list[str] = []

        self.pending_output: str = ''
        for detail in self.details:
            detail_msg = detail.get('message', '')
            index = detail_msg.find(CONSOLE_HEADER)
            if index != -1:
                self.pending_output = detail_msg[index + len(CONSOLE_HEADER):]

            else:
                self.messages.append(detail_msg)
                msg += f' {detail_msg}'

        super().__init__(msg)

    @staticmethod
    def is_json_error(obj: Any) -> bool:
        return (
            isinstance(obj, dict)
            and isinstance(obj.get('code'), int)
            and isinstance(obj.get('name'), str)
            and isinstance(obj.get('what'), str)
            and isinstance(obj.get('details'), list)
        )

    @classmethod
    def from_json(cls, err: dict):
        return cls(
            err['code'],
            err['name'],
            err['what'],
            err['details']
        )

    def __repr__(self) -> str:
        rep = ', '.join((
            f'ChainAPIError [{self.code}]: {self.what}',
            *[f'detail msg {i + 1}: {m}' for i, m in enumerate(self.messages)],
        ))

        if self.pending_output:
            rep += f', {self.pending_output}'

        return rep


class ChainHTTPError(Exception):
    '''
    example error:
    {
        "code": 500,
        "message": "Internal Service Error",
        "error": {chain api error}
    }
    '''

    def __init__(
        self,
        code: int,
        message: str,
        error: ChainAPIError
    ):
        super().__init__(message)
        self.code = code
        self.error = error

    @staticmethod
    def is_json_error(obj: Any) -> bool:
        return (
            isinstance(obj, dict)
            and isinstance(obj.get('code'), int)
            and 400 <= obj['code'] <= 599
            and isinstance(obj.get('message'), str)
            and ChainAPIError.is_json_error(obj.get('error'))
        )

    @classmethod
    def from_json(cls, err: dict):
        return cls(
            err['code'],
            err['message'],
            ChainAPIError.from_json(err['error'])
        )


def _maybe_http_error(content: str | None) -> ChainHTTPError | None:
    if not content:
        return None

    try:
        obj = json.loads(content)

    except ValueError:
        return None

    # bodies can be any json value: strings, numbers, null, lists
    if not isinstance(obj, dict) or not ChainHTTPError.is_json_error(obj):
        return None

    return ChainHTTPError.from_json(obj)


class HyperionAPIError(HyperionError):
    '''
    Every endpoint failure that got an http response ends up here, so callers
    can branch on ``status_code`` no matter which route failed.

    :param status_code: http status of the response
    :param content: raw response body as text
    :param parse_error: decoder message when a 2xx body didn't match the
        expected record
    '''

    def __init__(
        self,
        status_code: int,
        content: str | None,
        parse_error: str | None = None
    ):
        self.status_code = status_code
        self.content = content
        self.parse_error = parse_error
        self.http_error = _maybe_http_error(content)

        if parse_error is not None:
            msg = f'could not parse response ({status_code}): {parse_error}'

        else:
            msg = f'unexpected http status {status_code}'

        preview = '(null)' if content is None else content[:MAX_CONTENT_PREVIEW]
        super().__init__(f'{msg}\n\nStatus: {status_code}\nResponse: \n{preview}')

    @property
    def chain_error(self) -> ChainAPIError | None:
        if self.http_error is None:
            return None

        return self.http_error.error

    @property
    def is_parse_error(self) -> bool:
        return self.parse_error is not None

    def __repr__(self) -> str:
        rep = f'{type(self).__name__} [{self.status_code}]'
        if self.parse_error is not None:
            rep += f': {self.parse_error}'

        if self.chain_error is not None:
            rep += f', {self.chain_error!r}'

        return rep


class HyperionParseError(HyperionAPIError):

    def __init__(
        self,
        status_code: int,
        content: str | None,
        parse_error: str
    ):
        super().__init__(status_code, content, parse_error=parse_error)
