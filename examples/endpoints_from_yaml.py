"""Example: Endpoints loaded from YAML settings"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from url_builder import EndpointConfigLoader, UrlBuilderSettings, int_, string
from url_builder.log_config import (
    BuildContext,
    UrlLoggingConfig,
    configure_logging,
    set_logging_config,
)

settings = UrlBuilderSettings.load_from_yaml(Path(__file__).parent / "url_settings" / "config.yaml")

logging_config = UrlLoggingConfig.from_dict({"level": settings.log_level, **settings.logging})
set_logging_config(logging_config)
configure_logging(logging_config.level, json_output=logging_config.json_output)

loader = EndpointConfigLoader(settings)
print(f"Environment: {settings.environment}")
print(f"Endpoints: {loader.endpoint_names()}")

with BuildContext(request_id="demo-1"):
    products = loader.build_endpoint("products", {"region": "us"})
    print(products.build(["42"], [int_("page", 2)]))

    search = loader.build_endpoint("search", {"tag": "sale"})
    print(search.build(params=[string("q", "wool hat")]))
