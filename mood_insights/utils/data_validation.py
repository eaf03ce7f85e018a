# mood_insights/utils/data_validation.py

import json
import logging
import os

import pandas as pd
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class FileValidator:
    """Utility class for validating external data files against the record models"""

    @staticmethod
    def validate_dataframe(df, model_class, error_handling='filter'):
        """
        Validate DataFrame rows against a Pydantic model

        Args:
            df: DataFrame whose columns match the model fields
            model_class: Pydantic model class to validate against
            error_handling: 'filter' (drop and log invalid rows) or 'raise'

        Returns:
            list: Model instances for the valid rows, in row order
        """
        if df is None or len(df) == 0:
            return []

        # Missing CSV cells arrive as NaN; the models expect None
        clean = df.astype(object).where(pd.notna(df), None)

        records = []
        for i, row in clean.iterrows():
            try:
                records.append(model_class.model_validate(row.to_dict()))
            except ValidationError as e:
                if error_handling == 'raise':
                    raise
                logger.warning(f"Validation error in row {i}: {e}")

        return records

    @staticmethod
    def validate_csv(file_path, model_class, error_handling='filter'):
        """
        Validate a CSV file against a Pydantic model

        Args:
            file_path: Path to CSV file
            model_class: Pydantic model class to validate against
            error_handling: 'filter' or 'raise'

        Returns:
            list: Model instances for the valid rows (empty if the file is missing)
        """
        if not os.path.exists(file_path):
            if error_handling == 'raise':
                raise FileNotFoundError(f"File not found: {file_path}")
            logger.error(f"File not found: {file_path}")
            return []

        df = pd.read_csv(file_path)
        return FileValidator.validate_dataframe(df, model_class, error_handling)

    @staticmethod
    def validate_json(file_path, model_class, error_handling='filter'):
        """
        Validate a JSON list of records against a Pydantic model

        Args:
            file_path: Path to JSON file holding a list of objects
            model_class: Pydantic model class to validate against
            error_handling: 'filter' or 'raise'

        Returns:
            list: Model instances for the valid items
        """
        if not os.path.exists(file_path):
            if error_handling == 'raise':
                raise FileNotFoundError(f"File not found: {file_path}")
            logger.error(f"File not found: {file_path}")
            return []

        with open(file_path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Expected a list of records in {file_path}")

        valid_items = []
        for i, item in enumerate(data):
            try:
                valid_items.append(model_class.model_validate(item))
            except ValidationError as e:
                if error_handling == 'raise':
                    raise
                logger.warning(f"Validation error in item {i}: {e}")
        return valid_items
