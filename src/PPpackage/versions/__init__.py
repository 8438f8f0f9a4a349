COORDINATOR_PACKAGE_NAME = "PPpackage/versions"

TOOL_VENDOR, TOOL_NAME = COORDINATOR_PACKAGE_NAME.split("/")

NAMESPACE_PATH = "PPpackage/versions"

VERSIONS_MODULE_FILE_NAME = "Versions.py"
