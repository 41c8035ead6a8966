"""Monitored application upgrade against a cluster named by SF_* environment variables.

Usage:
    SF_CLUSTER_ENDPOINT=https://mycluster:19080 python examples/rolling_upgrade.py fabric:/Voting 2.0.0
"""

from __future__ import annotations

import asyncio
import logging
import sys

from servicefabric import (
    AsyncServiceFabricClient,
    ExponentialBackoff,
    LoggingMiddleware,
    WaitTimeoutError,
    acollect_all,
    summarize_upgrade,
)
from servicefabric.models import (
    ApplicationUpgradeDescription,
    FailureAction,
    HealthStateFilter,
    MonitoringPolicyDescription,
    UpgradeMode,
)


def _upgrade_description(application_name: str, version: str) -> ApplicationUpgradeDescription:
    return ApplicationUpgradeDescription(
        name=application_name,
        target_application_type_version=version,
        rolling_upgrade_mode=UpgradeMode.MONITORED,
        monitoring_policy=MonitoringPolicyDescription(
            failure_action=FailureAction.ROLLBACK,
            health_check_wait_duration_in_milliseconds="PT30S",
            upgrade_timeout_in_milliseconds="PT1H",
        ),
    )


async def run_upgrade(application_name: str, version: str) -> None:
    client = AsyncServiceFabricClient.from_env(retry_policy=ExponentialBackoff())
    client.use_middleware(LoggingMiddleware())
    try:
        health = await client.typed.cluster.get_health(
            nodes_health_state_filter=HealthStateFilter.WARNING | HealthStateFilter.ERROR,
        )
        print(f"cluster health: {health.aggregated_health_state}")

        nodes = await acollect_all(client.typed.nodes.list)
        down = [node.name for node in nodes if node.node_status is not None and node.node_status.value != "Up"]
        if down:
            print(f"nodes not up: {', '.join(down)}")

        await client.applications.start_upgrade(application_name, _upgrade_description(application_name, version))
        try:
            progress = await client.wait.application_upgrade(application_name, interval_seconds=15.0)
        except WaitTimeoutError as error:
            print(f"upgrade still running: {error}")
            progress = await client.applications.get_upgrade(application_name)

        summary = summarize_upgrade(progress)
        print(
            f"{application_name}: {summary.upgrade_state} "
            f"({summary.completed_domains}/{summary.total_domains} domains, {summary.percent_complete:.0f}%)"
        )
    finally:
        await client.close()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        raise SystemExit(__doc__)
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_upgrade(sys.argv[1], sys.argv[2]))
