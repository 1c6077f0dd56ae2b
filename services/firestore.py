# services/firestore.py
import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore_v1.async_client import AsyncClient

import config


def initialize_firebase_app():
    if not firebase_admin._apps:
        cred_path = config.SERVICE_ACCOUNT_PATH
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Service account key not found at {cred_path}.")
        cred = credentials.Certificate(cred_path)
        firebase_admin.initialize_app(cred)
        logging.info("Firebase Admin SDK initialized successfully.")


def get_firestore_client() -> AsyncClient:
    initialize_firebase_app()
    return firestore_async.client()
