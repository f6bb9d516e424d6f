"""Lambda function that runs AWS Textract text detection on an S3 image."""
