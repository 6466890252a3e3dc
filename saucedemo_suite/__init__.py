"""
Swag Labs test suites package.

Kept importable so that:
  - UI fixtures and page objects can be shared across test modules
  - the runner (`run_tests.py`) and CI jobs can import suite helpers

Layout:
  - ui_testing/framework: browser session lifecycle and base page object
  - ui_testing/pages: page objects for the Swag Labs pages
  - ui_testing/tests: live-site UI tests (opt-in with --run-ui)
  - unit: browser-free tests of the session lifecycle
"""
