"""Common literal values used across k6_docs.

These constants keep template identifiers, manifest filenames, and frontmatter
keys centralized so the generator, the site writer, and tests can import the
same values without drifting. Intended for internal use within the k6_docs
package.

Examples
--------
>>> from k6_docs import _constants
>>> _constants.ROUTES_MANIFEST
'.k6-docs-routes.json'
>>> _constants.TEMPLATE_FILES[_constants.DOC_PAGE_TEMPLATE]
'doc_page.jinja'
"""

DOC_PAGE_TEMPLATE = "doc_page"
SECTION_INDEX_TEMPLATE = "section_index"
BREADCRUMB_STUB_TEMPLATE = "breadcrumb_stub"

TEMPLATE_FILES: dict[str, str] = {
    DOC_PAGE_TEMPLATE: "doc_page.jinja",
    SECTION_INDEX_TEMPLATE: "section_index.jinja",
    BREADCRUMB_STUB_TEMPLATE: "breadcrumb_stub.jinja",
}
REDIRECT_PAGE_TEMPLATE_FILE = "redirect.jinja"

ROUTES_MANIFEST = ".k6-docs-routes.json"
REDIRECTS_FILE = "_redirects"

FRONTMATTER_TITLE = "title"
FRONTMATTER_HEAD_TITLE = "head_title"
FRONTMATTER_EXCERPT = "excerpt"
FRONTMATTER_REDIRECT = "redirect"
FRONTMATTER_HIDE_FROM_SIDEBAR = "hideFromSidebar"
FRONTMATTER_DRAFT = "draft"
