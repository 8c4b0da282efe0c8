# py-hyperion: Hyperion history API client
# Copyright 2021-eternity Guillermo Rodriguez

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.

# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from ..responses import (
    ControlledAccountsResponse,
    GetAccountResponse,
    GetCreatedAccountsResponse,
    GetCreatorResponse,
    GetLinksResponse,
    GetTokensResponse,
    KeyAccountsResponse,
)

from ._base import EndpointClient, Route


class AccountsClient(EndpointClient):

    def get_created_accounts(
        self,
        account: str,
        limit: int | None = None,
        skip: int | None = None
    ) -> GetCreatedAccountsResponse:
        '''Accounts created by ``account``.
        '''
        return self._call(Route(
            'GET', '/v2/history/get_created_accounts',
            GetCreatedAccountsResponse,
            params={
                'account': account,
                'limit': limit,
                'skip': skip
            }
        ))

    def get_creator(self, account: str) -> GetCreatorResponse | None:
        '''Get account creator.

        :param account: created account
        :return: creation record, ``None`` if the account doesn't exist
        :rtype: GetCreatorResponse | None
        '''
        return self._call(Route(
            'GET', '/v2/history/get_creator', GetCreatorResponse,
            params={'account': account},
            empty_as_none=True
        ))

    def get_account(
        self,
        account: str,
        limit: int | None = None,
        skip: int | None = None
    ) -> GetAccountResponse | None:
        '''Account summary: chain account, links, tokens and latest actions.

        :param account: account name
        :param limit: limit of [n] actions per page
        :param skip: skip [n] actions
        :return: summary, ``None`` if the account doesn't exist
        :rtype: GetAccountResponse | None
        '''
        return self._call(Route(
            'GET', '/v2/state/get_account', GetAccountResponse,
            params={
                'account': account,
                'limit': limit,
                'skip': skip
            },
            empty_as_none=True
        ))

    def get_key_accounts(
        self,
        public_key: str,
        limit: int | None = None,
        skip: int | None = None,
        details: bool | None = None
    ) -> KeyAccountsResponse:
        '''Accounts by public key, ``details`` adds the matching permissions.
        '''
        return self._call(Route(
            'GET', '/v2/state/get_key_accounts', KeyAccountsResponse,
            params={
                'public_key': public_key,
                'limit': limit,
                'skip': skip,
                'details': details
            }
        ))

    def get_key_accounts_v1(self, public_key: str) -> KeyAccountsResponse:
        return self._call(Route(
            'POST', '/v1/history/get_key_accounts', KeyAccountsResponse,
            body={'public_key': public_key}
        ))

    def get_links(
        self,
        account: str | None = None,
        code: str | None = None,
        action: str | None = None,
        permission: str | None = None
    ) -> GetLinksResponse:
        '''Get permission links.
        '''
        return self._call(Route(
            'GET', '/v2/state/get_links', GetLinksResponse,
            params={
                'account': account,
                'code': code,
                'action': action,
                'permission': permission
            }
        ))

    def get_tokens(
        self,
        account: str,
        limit: int | None = None,
        skip: int | None = None
    ) -> GetTokensResponse:
        return self._call(Route(
            'GET', '/v2/state/get_tokens', GetTokensResponse,
            params={
                'account': account,
                'limit': limit,
                'skip': skip
            }
        ))

    def get_controlled_accounts(
        self,
        controlling_account: str
    ) -> ControlledAccountsResponse:
        return self._call(Route(
            'POST', '/v1/history/get_controlled_accounts',
            ControlledAccountsResponse,
            body={'controlling_account': controlling_account}
        ))
