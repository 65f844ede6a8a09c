"""Legacy URL redirects emitted alongside the generated pages.

The table below is declarative data: old routes that moved when the docs were
reorganised, kept so external links keep working. :func:`build_redirect_rules`
prepends the welcome-page redirect (which depends on the deployment path
prefix) and appends any redirects declared in the site configuration.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import RedirectConfig


@dc.dataclass(frozen=True, slots=True)
class RedirectRule:
    """A single ``from -> to`` redirect handed to the site writer."""

    from_path: str
    to_path: str
    permanent: bool = True
    redirect_in_browser: bool = False

    @property
    def status_code(self) -> int:
        """Return the HTTP status used when the rule is served by the host."""
        return 301 if self.permanent else 302

    def to_dict(self) -> dict[str, str | bool]:
        """Return a JSON-ready mapping of the rule."""
        return {
            "from_path": self.from_path,
            "to_path": self.to_path,
            "permanent": self.permanent,
            "redirect_in_browser": self.redirect_in_browser,
        }


WELCOME_PATH = "/getting-started/welcome"

LEGACY_REDIRECTS: tuple[tuple[str, str], ...] = (
    (
        "/javascript-api/k6-http/cookiejar-k6-http",
        "/javascript-api/k6-http/cookiejar",
    ),
    (
        "/javascript-api/k6-http/cookiejar-k6-http/cookiejar-cookiesforurl-url",
        "/javascript-api/k6-http/cookiejar/cookiejar-cookiesforurl-url",
    ),
    (
        "/javascript-api/k6-http/cookiejar-k6-http/cookiejar-set-name-value-options",
        "/javascript-api/k6-http/cookiejar/cookiejar-set-name-value-options",
    ),
    (
        "/javascript-api/k6-http/filedata-k6-http",
        "/javascript-api/k6-http/filedata",
    ),
    (
        "/javascript-api/k6-http/params-k6-http",
        "/javascript-api/k6-http/params",
    ),
    (
        "/javascript-api/k6-http/response-k6-http",
        "/javascript-api/k6-http/response",
    ),
    (
        "/javascript-api/k6-http/response-k6-http/response-clicklink-params",
        "/javascript-api/k6-http/response/response-clicklink-params",
    ),
    (
        "/javascript-api/k6-http/response-k6-http/response-html",
        "/javascript-api/k6-http/response/response-html",
    ),
    (
        "/javascript-api/k6-http/response-k6-http/response-json-selector",
        "/javascript-api/k6-http/response/response-json-selector",
    ),
    (
        "/javascript-api/k6-http/response-k6-http/response-submitform-params",
        "/javascript-api/k6-http/response/response-submitform-params",
    ),
    (
        "/javascript-api/k6-metrics/counter-k6-metrics",
        "/javascript-api/k6-metrics/counter",
    ),
    (
        "/javascript-api/k6-metrics/counter-k6-metrics/counter-add-value-tags",
        "/javascript-api/k6-metrics/counter/counter-add-value-tags",
    ),
    (
        "/javascript-api/k6-metrics/gauge-k6-metrics",
        "/javascript-api/k6-metrics/gauge",
    ),
    (
        "/javascript-api/k6-metrics/gauge-k6-metrics/gauge-add-value-tags",
        "/javascript-api/k6-metrics/gauge/gauge-add-value-tags",
    ),
    (
        "/javascript-api/k6-metrics/rate-k6-metrics",
        "/javascript-api/k6-metrics/rate",
    ),
    (
        "/javascript-api/k6-metrics/rate-k6-metrics/rate-add-value-tags",
        "/javascript-api/k6-metrics/rate/rate-add-value-tags",
    ),
    (
        "/javascript-api/k6-metrics/trend-k6-metrics",
        "/javascript-api/k6-metrics/trend",
    ),
    (
        "/javascript-api/k6-metrics/trend-k6-metrics/trend-add-value-tags",
        "/javascript-api/k6-metrics/trend/trend-add-value-tags",
    ),
    ("/using-k6/archives-for-bundling-sharing-a-test", "/misc/archive"),
    ("/using-k6/ssl-tls", "/using-k6/protocols/ssl-tls"),
    (
        "/using-k6/ssl-tls/online-certificate-status-protocol-ocsp",
        "/using-k6/protocols/ssl-tls/online-certificate-status-protocol-ocsp",
    ),
    (
        "/using-k6/ssl-tls/ssl-tls-client-certificates",
        "/using-k6/protocols/ssl-tls/ssl-tls-client-certificates",
    ),
    (
        "/using-k6/ssl-tls/ssl-tls-version-and-ciphers",
        "/using-k6/protocols/ssl-tls/ssl-tls-version-and-ciphers",
    ),
    (
        "/using-k6/multipart-requests-file-uploads",
        "/examples/data-uploads",
    ),
    (
        "/getting-started/results-output/apache-kafka",
        "/results-visualization/apache-kafka",
    ),
    (
        "/getting-started/results-output/cloud",
        "/results-visualization/cloud",
    ),
    (
        "/results-visualization/k6-cloud-test-results",
        "/results-visualization/cloud",
    ),
    (
        "/getting-started/results-output/datadog",
        "/results-visualization/datadog",
    ),
    (
        "/getting-started/results-output/influxdb",
        "/results-visualization/influxdb-+-grafana",
    ),
    (
        "/getting-started/results-output/json",
        "/results-visualization/json",
    ),
    (
        "/getting-started/results-output/statsd",
        "/results-visualization/statsd",
    ),
    (
        "/javascript-api/k6-metrics/counter/counter-add-value-tags",
        "/javascript-api/k6-metrics/counter-k6-metrics/counter-add-value-tags",
    ),
    (
        "/javascript-api/k6-metrics/gauge/gauge-add-value-tags",
        "/javascript-api/k6-metrics/gauge-k6-metrics/gauge-add-value-tags",
    ),
    (
        "/javascript-api/k6-metrics/rate/rate-add-value-tags",
        "/javascript-api/k6-metrics/rate-k6-metrics/rate-add-value-tags",
    ),
    (
        "/javascript-api/k6-metrics/trend/trend-add-value-tags",
        "/javascript-api/k6-metrics/trend-k6-metrics/trend-add-value-tags",
    ),
    (
        "/javascript-api/k6-http/cookiejar/cookiejar-cookiesforurl-url",
        "/javascript-api/k6-http/cookiejar-k6-http/cookiejar-cookiesforurl-url",
    ),
    (
        "/javascript-api/k6-http/cookiejar/cookiejar-set-name-value-options",
        "/javascript-api/k6-http/cookiejar-k6-http/cookiejar-set-name-value-options",
    ),
    (
        "/javascript-api/k6-http/response/response-clicklink-params",
        "/javascript-api/k6-http/response-k6-http/response-clicklink-params",
    ),
    (
        "/javascript-api/k6-http/response/response-submitform-params",
        "/javascript-api/k6-http/response-k6-http/response-submitform-params",
    ),
    (
        "/using-k6/cloud-execution",
        "/cloud/creating-and-running-a-test/cloud-tests-from-the-cli",
    ),
    ("/using-k6/html/working-with-html-forms", "/examples/html-forms"),
    ("/using-k6/html", "/javascript-api/k6-html"),
)


def build_redirect_rules(
    *,
    path_prefix: str = "",
    extra: cabc.Iterable[RedirectConfig] = (),
) -> tuple[RedirectRule, ...]:
    """Return every redirect rule for the site in emission order.

    Parameters
    ----------
    path_prefix : str, optional
        Deployment prefix (for example ``"/docs"``); the welcome page redirects
        to it, or to ``/`` when empty.
    extra : Iterable[RedirectConfig], optional
        Additional redirects declared in the site configuration.

    Returns
    -------
    tuple[RedirectRule, ...]
        The welcome redirect, the legacy table, then ``extra`` in order.
    """
    prefix = path_prefix.rstrip("/")
    rules = [
        RedirectRule(
            from_path=f"{prefix}{WELCOME_PATH}",
            to_path=prefix or "/",
            permanent=True,
            redirect_in_browser=True,
        )
    ]
    rules.extend(
        RedirectRule(from_path=from_path, to_path=to_path)
        for from_path, to_path in LEGACY_REDIRECTS
    )
    rules.extend(
        RedirectRule(
            from_path=entry.from_path,
            to_path=entry.to_path,
            permanent=entry.permanent,
            redirect_in_browser=entry.redirect_in_browser,
        )
        for entry in extra
    )
    return tuple(rules)


__all__ = ["LEGACY_REDIRECTS", "WELCOME_PATH", "RedirectRule", "build_redirect_rules"]
