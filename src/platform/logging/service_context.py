"""
Service context for log lines.

Identifies which service instance wrote a line: `<service>@<env>:<instance>`.
The instance is the ECS task id when running in ECS, otherwise the PID.
"""

import os
from functools import lru_cache


DEFAULT_SERVICE_NAME = 'ticket-purchase'


def _instance_id() -> str:
    metadata_uri = os.getenv('ECS_CONTAINER_METADATA_URI_V4', '')
    if not metadata_uri:
        return str(os.getpid())
    # URI looks like: http://169.254.170.2/v4/{task_id}-{timestamp}
    task_id = metadata_uri.rstrip('/').split('/')[-1].split('-')[0][:8]
    return task_id or 'ecs'


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', DEFAULT_SERVICE_NAME)
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{_instance_id()}'
