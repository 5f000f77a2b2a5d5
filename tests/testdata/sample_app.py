"""Log calls used by the scanner tests. Parsed, never imported."""

import slog


def lowercase_rule():
    slog.Info("Starting server on port 8080")  # want "log message should start with lowercase letter"
    slog.Error("Failed to connect to database")  # want "log message should start with lowercase letter"

    slog.Info("starting server on port 8080")
    slog.Error("failed to connect to database")


def english_only_rule(ctx):
    slog.Info("Запуск сервера")  # want "log message should be in English only"
    slog.Error("Ошибка подключения к базе данных")  # want "log message should be in English only"
    slog.InfoContext(ctx, "Обработка запроса")  # want "log message should be in English only"

    slog.Info("starting server")
    slog.InfoContext(ctx, "processing request")


def special_chars_rule():
    slog.Info("server started!🚀")  # want "log message should not contain emojis"
    slog.Error("connection failed!!!")  # want "log message should not contain excessive punctuation or special characters"
    slog.Warn("warning: something went wrong...")  # want "log message should not contain excessive punctuation or special characters"

    slog.Info("server started")
    slog.Warn("something went wrong")


def sensitive_data_rule(password, api_key, token):
    slog.Info("user password: " + password)  # want "log message may contain sensitive data (keyword: password)"
    slog.Debug("api_key=" + api_key)  # want "log message may contain sensitive data (keyword: api_key)"
    slog.Info("token: " + token)  # want "log message may contain sensitive data (keyword: token)"

    slog.Info("user login successful")
    slog.Debug("api request completed")


def context_methods(ctx):
    slog.InfoContext(ctx, "Starting service")  # want "log message should start with lowercase letter"
    slog.ErrorContext(ctx, "Failed to process")  # want "log message should start with lowercase letter"

    slog.InfoContext(ctx, "starting service")
    slog.ErrorContext(ctx, "failed to process")


def valid_messages(message):
    slog.Info("server started successfully")
    slog.Debug("processing request")
    slog.Warn("connection timeout")
    slog.Error("failed to read file")
    slog.Info(message)
    print("Not a log call!!!")
