SERVICE_NAME = "requestable"
