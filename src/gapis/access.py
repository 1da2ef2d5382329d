from collections.abc import Iterable
from pathlib import Path
import copy
import json
import logging

import google.auth
import google.auth.credentials
import google.auth.exceptions
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.http import build_http

logger = logging.getLogger(__name__)

class __GCPAccess():
    """
    Class encapsulating authenticated access to Google Cloud.
    See https://cloud.google.com/docs/authentication/client-libraries for an overview
    of what you'll need.  Point client_secrets at an OAuth client file for the
    installed-app flow (it will trigger the confirmation screens once, then the
    refresh token is cached), or leave it missing and Application Default Credentials
    are used instead (gcloud auth application-default login, GOOGLE_APPLICATION_CREDENTIALS,
    the metadata server).
    Scopes are expected to be added by clients as needed and may trigger a refresh.

    It makes no sense to have multiple authenticated sessions per application so do this
    as a module singleton.  The API clients pick up authorized_http() from here unless
    they are handed their own credentials or http.
    """

    __SCOPES = {
        "cloud-platform": "https://www.googleapis.com/auth/cloud-platform",
        "cloud-platform-ro": "https://www.googleapis.com/auth/cloud-platform.read-only",
        "indexing": "https://www.googleapis.com/auth/indexing",
        "streetviewpublish": "https://www.googleapis.com/auth/streetviewpublish",
        "openid": "openid",
        "email": "email",
        "profile": "profile",
        "userinfo-email": "https://www.googleapis.com/auth/userinfo.email",
        "userinfo-profile": "https://www.googleapis.com/auth/userinfo.profile"
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/"

    __DEFAULT_AUTH_PROMPT_MSG = "Please visit this URL to authorize this application: {url}"
    __DEFAULT_AUTH_FLOW_SUCCESS_MSG = "The authentication flow has completed. You may close this window."
    __DEFAULT_SECRETS = Path.home() / "gapis_client_secrets.json"
    __DEFAULT_CACHE = Path.home() / "gapis_tokens.json"

    def __init__(self) -> None:
        """
        config and scopes can be specified here but as this is a global singleton
        its more expected to add them later.
        """
        self.reset()

    def __bool__(self) -> bool:
        """True is we are connected and authenticated"""
        return self.connected

    def __str__(self) -> str:
        if self.connected:
            return f"Connected:{str(self.session_scopes)}"
        return f"Disconnected:{str(self.__scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be expected.
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIX):
            sc = s
        return sc

    @property
    def client_secrets(self) -> Path:
        """
        Path to the OAuth client secrets file downloaded from the Cloud console.
        """
        return self.__secrets

    @client_secrets.setter
    def client_secrets(self, value: Path|str) -> None:
        """
        If this changes we need to reconnect as we have new credentials.
        """
        val = value if isinstance(value, Path) else Path(str(value))
        if val != self.__secrets:
            self.__secrets = val
            if self.connected:
                self.connect()

    @property
    def cred_cache(self) -> Path:
        """
        Path to local credential cache to not have to do full authentication each time.
        """
        return self.__cache

    @cred_cache.setter
    def cred_cache(self, value: Path|str):
        """
        If this changes we need to reconnect as the cache is now invalid.
        """
        val = value if isinstance(value, Path) else Path(str(value))
        if val != self.__cache:
            self.__cache = val
            if self.connected:
                self.connect()

    @property
    def connected(self) -> bool:
        """
        Are we authenticated with Google?
        """
        return bool(self.__creds) and bool(self.__creds.valid)

    @property
    def session_scopes(self) -> list[str]:
        """
        Scopes granted for this session.
        This differs to self.scopes as that is what is requested or to be requested.
        """
        if self.connected:
            return list(self.__creds.scopes or [])
        return []

    @property
    def scopes(self) -> list[str]:
        """
        The scopes requested or to be requested on next authentication sequence.
        """
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|list[str]|str) -> None:
        """
        Override the list of session scopes.
        This will trigger a reconnect if the new list contains scopes
        that are not part of the current authenticated list.
        """
        slist = []
        if value is not None:
            vals = [value] if isinstance(value, str) or not isinstance(value, Iterable) else value
            for v in vals:
                s = self.get_scope(str(v))
                if s:
                    slist.append(s)
        self.__scopes = slist
        if self.__scopes and self.connected:
            self.refresh()
        else:
            self.__creds = None

    def append_scopes(self, *args) -> bool:
        """
        Adding to the current scope list.
        Typically client modules add the specific scopes they require on import.
        """
        for a in args:
            b = [a] if isinstance(a, str) or not isinstance(a, Iterable) else a
            for i in b:
                s = self.get_scope(str(i))
                if s and s not in self.__scopes:
                    self.__scopes.append(s)
        return self.refresh()

    @property
    def creds(self) -> google.auth.credentials.Credentials|None:
        """
        Current active access credentials or None
        """
        return self.__creds

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for getting it all at once for pushing into a json, toml, ini, etc, file.
        """
        config = {
            'secrets': str(self.__secrets),
            'cache': str(self.__cache),
            'scopes': list(self.__scopes),
            'server': self.auth_server,
            'port': self.auth_port,
            'auth_prompt_msg': self.auth_prompt_msg,
            'flow_success_msg': self.auth_flow_success_msg,
            'num_retries': self.num_retries
        }
        return config

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict.
        Convenience method for inserting state pulled from a config file or equivalent.
        """
        reconnect = False
        v = config.get('port', None)
        if v is not None:
            self.auth_port = int(v)
        v = config.get('server', None)
        if v is not None:
            self.auth_server = str(v)
        v = config.get('scopes', [])
        if v:
            self.__scopes = [s for s in (self.get_scope(x) for x in v) if s]
            reconnect = True
        v = config.get('cache', None)
        if v is not None:
            self.__cache = Path(v)
            reconnect = True
        v = config.get('secrets', None)
        if v is not None:
            self.__secrets = Path(v)
            reconnect = True
        v = config.get('auth_prompt_msg', None)
        if v is not None:
            self.auth_prompt_msg = str(v)
        v = config.get('flow_success_msg', None)
        if v is not None:
            self.auth_flow_success_msg = str(v)
        v = config.get('num_retries', None)
        if v is not None:
            self.num_retries = int(v)
        if reconnect and self.connected:
            self.connect()

    def reset(self) -> None:
        """
        Reset all connection state to defaults.
        """
        self.__secrets = self.__DEFAULT_SECRETS
        self.__cache = self.__DEFAULT_CACHE
        self.__creds = None
        self.__scopes = []
        self.auth_server = 'localhost'
        self.auth_port = 0
        self.auth_prompt_msg = self.__DEFAULT_AUTH_PROMPT_MSG
        self.auth_flow_success_msg = self.__DEFAULT_AUTH_FLOW_SUCCESS_MSG
        self.num_retries = 0

    def refresh(self) -> bool:
        """
        Check the current scopes and if new requested ones are not present
        in the current session_scopes, refresh the access.
        """
        scopes_accounted = all(s in self.session_scopes for s in self.__scopes)
        if self.connected and not scopes_accounted:
            return self.connect()
        return True

    def connect(self) -> bool:
        """
        Establish a new authentication session.
        If a user OAuth flow succeeds the credentials are saved in the cache file
        to reuse on subsequent invocations.
        """
        self.__creds = None
        if not self.__scopes:
            return False
        requested_scopes = copy.copy(self.__scopes)
        if self.__cache.exists() and self.__cache.is_file():
            # the cache doesn't say what it was granted for so we record the scopes
            # ourselves and throw it away if they don't cover this request
            cf = self.__cache.resolve()
            with open(cf, 'r', encoding='utf-8') as f:
                j = json.load(f)
            scopes = j.get('scopes', [])
            if not all(s in scopes for s in requested_scopes):
                self.__cache.unlink()
            else:
                self.__creds = Credentials.from_authorized_user_file(str(cf), requested_scopes)
        if not self.connected:
            if self.__creds and self.__creds.refresh_token:
                try:
                    self.__creds.refresh(Request())
                except google.auth.exceptions.RefreshError as e:
                    logger.warning("failed to refresh stored creds: %s...deleting cred cache and re-authorizing", e)
                finally:
                    if not self.connected:
                        self.__cache.unlink(missing_ok=True)

            if not self.connected:
                if self.__secrets.exists() and self.__secrets.is_file():
                    flow = InstalledAppFlow.from_client_secrets_file(str(self.__secrets), requested_scopes)
                    self.__creds = flow.run_local_server(host=self.auth_server, port=self.auth_port,
                                                         authorization_prompt_message=self.auth_prompt_msg,
                                                         success_message=self.auth_flow_success_msg)
                else:
                    try:
                        # GOOGLE_APPLICATION_CREDENTIALS, gcloud's ADC file, metadata server
                        self.__creds, _ = google.auth.default(scopes=requested_scopes)
                        if not self.__creds.valid:
                            self.__creds.refresh(Request())
                    except google.auth.exceptions.DefaultCredentialsError as e:
                        logger.warning("no application default credentials: %s", e)
                        self.__creds = None

            if self.connected and isinstance(self.__creds, Credentials) and self.__creds.refresh_token:
                user_info = {'refresh_token': self.__creds.refresh_token, 'client_id': self.__creds.client_id,
                             'client_secret': self.__creds.client_secret, 'scopes': requested_scopes}
                with open(self.__cache.resolve(), 'w', encoding='utf-8') as f:
                    json.dump(user_info, f, ensure_ascii=False, indent=2)
        return self.connected

    def authorized_http(self) -> AuthorizedHttp|None:
        """
        An httplib2.Http that signs every request with the session credentials,
        connecting if required.  Can return None if no connection could be made.
        """
        if not self.connected:
            self.connect()
        if not self.connected:
            return None
        return AuthorizedHttp(self.__creds, http=build_http())

gcp = __GCPAccess()
