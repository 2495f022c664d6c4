from unittest.mock import MagicMock

from contrast_mcp.client.models import (
    AgentSession,
    Application,
    ApplicationMetadata,
    CveApp,
    CveData,
    CveLibrary,
    LibrariesPage,
    LibraryExtended,
    MetadataFilterField,
    MetadataFilterResponse,
    Project,
    ProtectData,
    ProtectRule,
    Route,
    RouteCoverageResponse,
    SessionMetadataResponse,
)
from contrast_mcp.exceptions import ContrastAPIError
from contrast_mcp.tools import (
    GetProtectRulesTool,
    GetRouteCoverageTool,
    GetSastProjectTool,
    GetSastResultsTool,
    GetSessionMetadataTool,
    ListApplicationLibrariesTool,
    ListApplicationsByCveTool,
    SearchApplicationsTool,
)

from conftest import ORG_ID


class TestGetProtectRules:
    def test_returns_rules(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_protect_config.return_value = ProtectData(success=True, rules=[ProtectRule(name="sql-injection")])

        response = GetProtectRulesTool(client_provider, ORG_ID).get_protect_rules("a1")

        mock_client.get_protect_config.assert_called_once_with(ORG_ID, "a1")
        assert response.success
        assert response.data.rule_count == 1
        assert response.warnings == []

    def test_zero_rules_warns(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_protect_config.return_value = ProtectData(success=True, rules=[])

        response = GetProtectRulesTool(client_provider, ORG_ID).get_protect_rules("a1")

        assert response.success
        assert response.warnings == ["Application has Protect enabled but no rules are configured."]

    def test_missing_app_id_skips_api(self, mock_client: MagicMock, client_provider) -> None:
        response = GetProtectRulesTool(client_provider, ORG_ID).get_protect_rules(None)

        mock_client.get_protect_config.assert_not_called()
        assert not response.success


class TestScanTools:
    def test_project_found(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.find_project_by_name.return_value = Project(id="p1", name="shop", language="JAVA")

        response = GetSastProjectTool(client_provider, ORG_ID).get_scan_project("shop")

        mock_client.find_project_by_name.assert_called_once_with(ORG_ID, "shop")
        assert response.found
        assert response.data.id == "p1"

    def test_project_not_found(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.find_project_by_name.return_value = None

        response = GetSastProjectTool(client_provider, ORG_ID).get_scan_project("missing")

        assert response.success
        assert not response.found
        assert response.data is None

    def test_results_without_scans(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.find_project_by_name.return_value = Project(id="p1", name="shop", last_scan_id=None)

        response = GetSastResultsTool(client_provider, ORG_ID).get_scan_results("shop")

        mock_client.get_scan_sarif.assert_not_called()
        assert not response.found
        assert "has no completed scans" in response.warnings[0]

    def test_results_return_sarif_with_deprecation(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.find_project_by_name.return_value = Project(id="p1", name="shop", last_scan_id="s9")
        mock_client.get_scan_sarif.return_value = '{"version": "2.1.0"}'

        response = GetSastResultsTool(client_provider, ORG_ID).get_scan_results("shop")

        mock_client.get_scan_sarif.assert_called_once_with(ORG_ID, "p1", "s9")
        assert response.data == '{"version": "2.1.0"}'
        assert response.warnings[-1].startswith("DEPRECATED")


class TestListApplicationsByCve:
    def _cve_data(self) -> CveData:
        return CveData(
            libraries=[CveLibrary(hash="vuln-hash", file_name="log4j-core-2.14.1.jar")],
            apps=[CveApp(name="Shop", app_id="a1"), CveApp(name="Batch", app_id="a2"), CveApp(name="Idle", app_id="a3")],
        )

    def test_invalid_cve_skips_api(self, mock_client: MagicMock, client_provider) -> None:
        response = ListApplicationsByCveTool(client_provider, ORG_ID).list_applications_by_cve("log4shell")

        mock_client.get_apps_for_cve.assert_not_called()
        assert response.errors[0].startswith("cveId must be in CVE format")

    def test_enriches_class_usage(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_apps_for_cve.return_value = self._cve_data()
        libraries = {
            "a1": [LibraryExtended(hash="other"), LibraryExtended(hash="vuln-hash", class_count=300, classes_used=12)],
            "a3": [LibraryExtended(hash="vuln-hash", class_count=300, classes_used=0)],
        }

        def get_all_libraries(org_id, app_id):
            if app_id == "a2":
                raise ContrastAPIError("boom", status_code=500)
            return libraries[app_id]

        mock_client.get_all_libraries.side_effect = get_all_libraries

        response = ListApplicationsByCveTool(client_provider, ORG_ID).list_applications_by_cve("CVE-2021-44228")

        assert response.success
        apps = {app.app_id: app for app in response.data.apps}
        assert (apps["a1"].class_count, apps["a1"].class_usage) == (300, 12)
        assert (apps["a2"].class_count, apps["a2"].class_usage) == (0, 0)
        assert (apps["a3"].class_count, apps["a3"].class_usage) == (0, 0)
        assert len(response.warnings) == 1
        assert "Could not fetch class usage data for application 'Batch'" in response.warnings[0]

    def test_class_usage_from_later_loaded_version(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_apps_for_cve.return_value = CveData(
            libraries=[CveLibrary(hash="h1", version="2.14.0"), CveLibrary(hash="h2", version="2.14.1")],
            apps=[CveApp(name="Shop", app_id="a1")],
        )
        mock_client.get_all_libraries.return_value = [
            LibraryExtended(hash="h1", class_count=280, classes_used=0),
            LibraryExtended(hash="h2", class_count=300, classes_used=7),
        ]

        response = ListApplicationsByCveTool(client_provider, ORG_ID).list_applications_by_cve("CVE-2021-44228")

        app = response.data.apps[0]
        assert (app.class_count, app.class_usage) == (300, 7)

    def test_no_apps_warns(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_apps_for_cve.return_value = CveData(apps=None)

        response = ListApplicationsByCveTool(client_provider, ORG_ID).list_applications_by_cve("CVE-2021-44228")

        mock_client.get_all_libraries.assert_not_called()
        assert response.found
        assert response.warnings[0].startswith("No applications found with this CVE.")

    def test_unknown_cve_is_not_found(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_apps_for_cve.return_value = None

        response = ListApplicationsByCveTool(client_provider, ORG_ID).list_applications_by_cve("CVE-2021-44228")

        assert response.success
        assert not response.found


class TestListApplicationLibraries:
    def test_page_is_capped_at_fifty(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_library_page.return_value = LibrariesPage(
            libraries=[LibraryExtended(file_name="a.jar", total_vulnerabilities=2)], count=120
        )

        response = ListApplicationLibrariesTool(client_provider, ORG_ID).list_application_libraries("a1", page=2, page_size=100)

        mock_client.get_library_page.assert_called_once_with(ORG_ID, "a1", limit=50, offset=50)
        assert response.page_size == 50
        assert response.total_items == 120
        assert response.has_more_pages
        assert response.data[0].total_vulnerabilities == 2
        assert "pageSize clamped from 100 to maximum 50" in response.warnings

    def test_no_libraries_warns_on_first_page(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_library_page.return_value = LibrariesPage(libraries=None, count=None)

        response = ListApplicationLibrariesTool(client_provider, ORG_ID).list_application_libraries("a1")

        assert response.success
        assert response.total_items == 0
        assert response.warnings[0].startswith("No libraries found for this application.")
        assert response.warnings[-1] == "No results found matching the specified criteria."


class TestGetRouteCoverage:
    def test_unfiltered(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_route_coverage.return_value = RouteCoverageResponse(
            success=True, routes=[Route(status="EXERCISED"), Route(status="DISCOVERED")]
        )

        response = GetRouteCoverageTool(client_provider, ORG_ID).get_route_coverage("a1")

        mock_client.get_route_coverage.assert_called_once_with(ORG_ID, "a1", None)
        assert response.data.coverage_percent == 50.0

    def test_metadata_filter_builds_request(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_route_coverage.return_value = RouteCoverageResponse(success=True, routes=None)

        GetRouteCoverageTool(client_provider, ORG_ID).get_route_coverage("a1", "branch", "main")

        request = mock_client.get_route_coverage.call_args.args[2]
        assert request.session_id is None
        assert request.metadata[0].label == "branch"
        assert request.metadata[0].values == ["main"]

    def test_latest_session(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_latest_session_metadata.return_value = SessionMetadataResponse(
            agent_session=AgentSession(agent_session_id="sess-7")
        )
        mock_client.get_route_coverage.return_value = RouteCoverageResponse(success=True, routes=[])

        response = GetRouteCoverageTool(client_provider, ORG_ID).get_route_coverage("a1", "branch", "main", True)

        request = mock_client.get_route_coverage.call_args.args[2]
        assert request.session_id == "sess-7"
        assert request.metadata == []
        assert "useLatestSession takes precedence" in response.warnings[0]

    def test_latest_session_missing_is_not_found(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_latest_session_metadata.return_value = SessionMetadataResponse(agent_session=None)

        response = GetRouteCoverageTool(client_provider, ORG_ID).get_route_coverage("a1", use_latest_session=True)

        mock_client.get_route_coverage.assert_not_called()
        assert not response.found

    def test_unpaired_metadata_is_rejected(self, mock_client: MagicMock, client_provider) -> None:
        response = GetRouteCoverageTool(client_provider, ORG_ID).get_route_coverage("a1", session_metadata_name="branch")

        mock_client.get_route_coverage.assert_not_called()
        assert not response.success


class TestSessionMetadata:
    def test_returns_fields(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_session_metadata_filters.return_value = MetadataFilterResponse(
            success=True, filters=[MetadataFilterField(label="branch")]
        )

        response = GetSessionMetadataTool(client_provider, ORG_ID).get_session_metadata("a1")

        assert response.data.total_fields == 1
        assert response.data.app_id == "a1"

    def test_missing_metadata(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_session_metadata_filters.return_value = None

        response = GetSessionMetadataTool(client_provider, ORG_ID).get_session_metadata("a1")

        assert not response.found
        assert response.warnings[0].startswith("No session metadata found")
        assert response.warnings[-1] == "Resource not found"


class TestSearchApplications:
    def _apps(self):
        return [
            Application(name=f"Service {i}", app_id=f"a{i}", tags=["prod"] if i % 2 else ["dev"])
            for i in range(1, 8)
        ] + [
            Application(
                name="Billing",
                app_id="b1",
                tags=["prod"],
                metadata_entities=[ApplicationMetadata(name="team", value="payments")],
            )
        ]

    def test_filter_and_page(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_applications.return_value = self._apps()

        response = SearchApplicationsTool(client_provider, ORG_ID).search_applications(
            name="service", tag="prod", page=1, page_size=3
        )

        mock_client.get_applications.assert_called_once_with(ORG_ID)
        assert response.total_items == 4
        assert [app.app_id for app in response.data] == ["a1", "a3", "a5"]
        assert response.has_more_pages

    def test_metadata(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_applications.return_value = self._apps()

        response = SearchApplicationsTool(client_provider, ORG_ID).search_applications(
            metadata_name="Team", metadata_value="PAYMENTS"
        )

        assert [app.app_id for app in response.data] == ["b1"]
        assert not response.has_more_pages

    def test_page_past_the_end(self, mock_client: MagicMock, client_provider) -> None:
        mock_client.get_applications.return_value = self._apps()

        response = SearchApplicationsTool(client_provider, ORG_ID).search_applications(page=5, page_size=10)

        assert response.data == []
        assert response.total_items == 8
        assert not response.has_more_pages

    def test_invalid_filter_json(self, mock_client: MagicMock, client_provider) -> None:
        response = SearchApplicationsTool(client_provider, ORG_ID).search_applications(metadata_filters="[1]")

        mock_client.get_applications.assert_not_called()
        assert not response.success
