"""Default data keys, env var names, and paths shared with existing deployments."""

# ConfigMap data key holding the credential overlay JSON
CREDENTIAL_CONFIG_KEY_NAME = "credentials"

# Used when the caller passes an empty service account name
DEFAULT_SERVICE_ACCOUNT = "default"

# S3: secret data keys (the access key ID key identifies an S3 secret)
AWS_ACCESS_KEY_ID_NAME = "awsAccessKeyID"
AWS_SECRET_ACCESS_KEY_NAME = "awsSecretAccessKey"

# S3: env vars set on the container
AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
AWS_REGION = "AWS_REGION"
S3_ENDPOINT = "S3_ENDPOINT"
S3_USE_HTTPS = "S3_USE_HTTPS"
S3_VERIFY_SSL = "S3_VERIFY_SSL"

# S3: per-secret annotations (win over the config overlay values)
S3_ENDPOINT_ANNOTATION = "serving.kubeflow.org/s3-endpoint"
S3_USE_HTTPS_ANNOTATION = "serving.kubeflow.org/s3-usehttps"
S3_REGION_ANNOTATION = "serving.kubeflow.org/s3-region"
S3_VERIFY_SSL_ANNOTATION = "serving.kubeflow.org/s3-verifyssl"

# GCS: the credential file key identifies a GCS secret
GCS_CREDENTIAL_FILE_NAME = "gcloud-application-credentials.json"
GCS_CREDENTIAL_ENV_KEY = "GOOGLE_APPLICATION_CREDENTIALS"
# Trailing slash matters: the env value is this prefix + file name
GCS_CREDENTIAL_VOLUME_MOUNT_PATH = "/var/secrets/"

# Kinds served by the object stores
SERVICE_ACCOUNT_KIND = "ServiceAccount"
SECRET_KIND = "Secret"
CONFIG_MAP_KIND = "ConfigMap"
