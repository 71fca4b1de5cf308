#!/usr/bin/env python3
"""Print the CloudFormation outputs of a deployed web UI stack."""

import argparse
import json
import sys

import boto3  # type: ignore[import-not-found]
from botocore.exceptions import BotoCoreError, ClientError


def get_outputs(stack_name: str, region: str = "us-east-1") -> dict[str, str]:
  """Retrieve stack outputs from CloudFormation.

  Args:
    stack_name: The CloudFormation stack name (e.g., 'SimpleWebUI-docs')
    region: AWS region

  Returns:
    Dictionary of output key to value, e.g. {"SimpleWebUIBucket": "..."}
  """
  cloudformation = boto3.client("cloudformation", region_name=region)

  response = cloudformation.describe_stacks(StackName=stack_name)
  stacks = response.get("Stacks", [])
  if not stacks:
    raise LookupError(f"Stack not found: {stack_name}")

  return {
    output["OutputKey"]: output["OutputValue"]
    for output in stacks[0].get("Outputs", [])
  }


def format_outputs(outputs: dict[str, str], fmt: str = "env") -> str:
  """Render outputs as env lines, shell exports, or JSON."""
  if fmt == "json":
    return json.dumps(outputs, indent=2)
  prefix = "export " if fmt == "export" else ""
  return "\n".join(f"{prefix}{key}={value}" for key, value in outputs.items())


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the outputs of a deployed web UI stack"
  )
  parser.add_argument(
    "stack_name",
    help="CloudFormation stack name (e.g., SimpleWebUI-docs)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json", "export"],
    default="env",
    help="Output format (default: env)",
  )

  args = parser.parse_args()

  try:
    outputs = get_outputs(args.stack_name, args.region)
  except (BotoCoreError, ClientError, LookupError) as e:
    print(f"Error retrieving stack outputs: {e}", file=sys.stderr)
    sys.exit(1)

  print(format_outputs(outputs, args.format))


if __name__ == "__main__":
  main()
