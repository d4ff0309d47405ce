import json
import boto3
import os
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

codedeploy = boto3.client('codedeploy')
lambda_client = boto3.client('lambda')

# Message the SMS function fails with for a malformed batch
EXPECTED_ERROR_MESSAGE = "Please enter a valid mobile number and message"


def lambda_handler(event, context):
    """
    Pre-traffic hook for CodeDeploy.
    Smoke tests the new version with an empty batch before shifting traffic.
    An empty batch must be rejected by validation, so no SMS is ever sent.
    """
    logger.info(f"Pre-traffic hook triggered: {json.dumps(event)}")

    deployment_id = event['DeploymentId']
    lifecycle_event_hook_execution_id = event['LifecycleEventHookExecutionId']

    try:
        target_function = os.environ.get('TARGET_FUNCTION')
        if not target_function:
            raise ValueError("TARGET_FUNCTION environment variable is not set")

        logger.info(f"Running smoke tests on {target_function}")

        response = lambda_client.invoke(
            FunctionName=target_function,
            InvocationType='RequestResponse',
            Payload=json.dumps({'Records': []})
        )

        response_payload = json.loads(response['Payload'].read())
        logger.info(f"Test response: {json.dumps(response_payload)}")

        if response.get('StatusCode') != 200:
            raise Exception(f"Unexpected status code: {response.get('StatusCode')}")

        # The function must reject the batch with the structure error
        if not response.get('FunctionError'):
            raise Exception(f"Empty batch was not rejected: {response_payload}")

        error_message = response_payload.get('errorMessage') if isinstance(response_payload, dict) else None
        if error_message != EXPECTED_ERROR_MESSAGE:
            raise Exception(f"Unexpected error message: {error_message}")

        logger.info("Pre-traffic validation passed")
        return _report(deployment_id, lifecycle_event_hook_execution_id)

    except Exception as e:
        logger.error(f"Pre-traffic validation failed: {str(e)}", exc_info=True)
        # A failed status stops the deployment
        return _report(deployment_id, lifecycle_event_hook_execution_id, str(e))


def _report(deployment_id, execution_id, failure=None):
    """Send the hook status to CodeDeploy and build the hook response."""
    codedeploy.put_lifecycle_event_hook_execution_status(
        deploymentId=deployment_id,
        lifecycleEventHookExecutionId=execution_id,
        status='Failed' if failure is not None else 'Succeeded'
    )

    if failure is not None:
        return {'statusCode': 500, 'body': json.dumps(f'Smoke test failed: {failure}')}
    return {'statusCode': 200, 'body': json.dumps('Smoke test passed')}
