"""This module support retrieving and validating configuration data from the cdk.json file."""
import os

from jsonschema import validate
from aws_cdk import App, Environment

schema = {
    "type": "object",
    "properties": {
        "account": {"type": "string", "pattern": "^[0-9]{12}$"},
        "region": {"type": "string"},
        "description": {"type": "string"},
        "tags": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
    "additionalProperties": False,
}


def get_config(app: App):
    """get the configuration of the selected target, or {} when none is selected"""
    target = app.node.try_get_context(key="learning-env")
    if not target:
        # No target means an environment-agnostic stack
        return {}

    target_config = app.node.try_get_context(key=target)
    if target_config is None:
        raise LookupError(
            f"The '{target}' target node is not configured in the cdk.json file."
            + " See cdk.json for available values, e.g. 'dev'."
            + " Then pass these into you cdk command as '--context learning-env=dev'"
        )

    validate(instance=target_config, schema=schema)

    return target_config


def stack_properties(config):
    """turn a validated config into keyword arguments for the LearningStack"""
    props = {}

    account = config.get("account") or os.getenv("CDK_DEFAULT_ACCOUNT")
    region = config.get("region") or os.getenv("CDK_DEFAULT_REGION")
    if account or region:
        props["env"] = Environment(account=account, region=region)

    if config.get("tags"):
        props["tags"] = dict(config["tags"])

    if config.get("description"):
        props["description"] = config["description"]

    return props
