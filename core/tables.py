"""Raw dependency identifier -> canonical technology name tables.

Keys are in the normalized form each parser emits: exact package names for
Node, PHP, Ruby, .NET, Rust, Dart and Elixir; PEP 503 names for Python;
Maven artifactIds for Java; full module paths for Go; lowercase image names
for Docker.
"""

from types import MappingProxyType

NODE_TECH = MappingProxyType({
    "react": "React",
    "react-dom": "React",
    "next": "Next.js",
    "vue": "Vue.js",
    "nuxt": "Nuxt",
    "@angular/core": "Angular",
    "svelte": "Svelte",
    "@sveltejs/kit": "SvelteKit",
    "solid-js": "Solid",
    "preact": "Preact",
    "astro": "Astro",
    "gatsby": "Gatsby",
    "@remix-run/react": "Remix",
    "express": "Express",
    "koa": "Koa",
    "fastify": "Fastify",
    "@nestjs/core": "NestJS",
    "@hapi/hapi": "hapi",
    "socket.io": "Socket.IO",
    "graphql": "GraphQL",
    "@apollo/client": "Apollo Client",
    "@apollo/server": "Apollo Server",
    "apollo-server": "Apollo Server",
    "redux": "Redux",
    "@reduxjs/toolkit": "Redux",
    "mobx": "MobX",
    "zustand": "Zustand",
    "@tanstack/react-query": "TanStack Query",
    "axios": "Axios",
    "lodash": "Lodash",
    "rxjs": "RxJS",
    "typescript": "TypeScript",
    "webpack": "Webpack",
    "vite": "Vite",
    "rollup": "Rollup",
    "esbuild": "esbuild",
    "parcel": "Parcel",
    "@babel/core": "Babel",
    "tailwindcss": "Tailwind CSS",
    "bootstrap": "Bootstrap",
    "sass": "Sass",
    "styled-components": "styled-components",
    "@emotion/react": "Emotion",
    "@mui/material": "Material UI",
    "antd": "Ant Design",
    "@chakra-ui/react": "Chakra UI",
    "three": "Three.js",
    "d3": "D3.js",
    "chart.js": "Chart.js",
    "jquery": "jQuery",
    "mongoose": "Mongoose",
    "mongodb": "MongoDB",
    "pg": "PostgreSQL",
    "mysql": "MySQL",
    "mysql2": "MySQL",
    "sqlite3": "SQLite",
    "redis": "Redis",
    "ioredis": "Redis",
    "prisma": "Prisma",
    "@prisma/client": "Prisma",
    "sequelize": "Sequelize",
    "typeorm": "TypeORM",
    "drizzle-orm": "Drizzle",
    "firebase": "Firebase",
    "@supabase/supabase-js": "Supabase",
    "aws-sdk": "AWS SDK",
    "stripe": "Stripe",
    "electron": "Electron",
    "react-native": "React Native",
    "expo": "Expo",
    "jest": "Jest",
    "vitest": "Vitest",
    "mocha": "Mocha",
    "chai": "Chai",
    "cypress": "Cypress",
    "@playwright/test": "Playwright",
    "puppeteer": "Puppeteer",
    "@testing-library/react": "Testing Library",
    "eslint": "ESLint",
    "prettier": "Prettier",
    "storybook": "Storybook",
    "@storybook/react": "Storybook",
    "zod": "Zod",
    "openai": "OpenAI",
    "langchain": "LangChain",
})

PYTHON_TECH = MappingProxyType({
    "django": "Django",
    "djangorestframework": "Django REST framework",
    "flask": "Flask",
    "fastapi": "FastAPI",
    "starlette": "Starlette",
    "tornado": "Tornado",
    "aiohttp": "aiohttp",
    "sanic": "Sanic",
    "pyramid": "Pyramid",
    "uvicorn": "Uvicorn",
    "gunicorn": "Gunicorn",
    "celery": "Celery",
    "requests": "Requests",
    "httpx": "HTTPX",
    "pydantic": "Pydantic",
    "sqlalchemy": "SQLAlchemy",
    "alembic": "Alembic",
    "psycopg2": "PostgreSQL",
    "psycopg2-binary": "PostgreSQL",
    "psycopg": "PostgreSQL",
    "asyncpg": "PostgreSQL",
    "pymysql": "MySQL",
    "mysqlclient": "MySQL",
    "pymongo": "MongoDB",
    "motor": "MongoDB",
    "redis": "Redis",
    "elasticsearch": "Elasticsearch",
    "boto3": "AWS SDK",
    "numpy": "NumPy",
    "pandas": "pandas",
    "scipy": "SciPy",
    "scikit-learn": "scikit-learn",
    "matplotlib": "Matplotlib",
    "seaborn": "seaborn",
    "plotly": "Plotly",
    "tensorflow": "TensorFlow",
    "keras": "Keras",
    "torch": "PyTorch",
    "jax": "JAX",
    "transformers": "Hugging Face Transformers",
    "langchain": "LangChain",
    "openai": "OpenAI",
    "opencv-python": "OpenCV",
    "pillow": "Pillow",
    "beautifulsoup4": "Beautiful Soup",
    "scrapy": "Scrapy",
    "selenium": "Selenium",
    "streamlit": "Streamlit",
    "dash": "Dash",
    "jupyter": "Jupyter",
    "pytest": "pytest",
    "black": "Black",
    "ruff": "Ruff",
    "mypy": "mypy",
    "click": "Click",
    "typer": "Typer",
})

JAVA_TECH = MappingProxyType({
    "spring-boot-starter": "Spring Boot",
    "spring-boot-starter-web": "Spring Boot",
    "spring-boot-starter-webflux": "Spring WebFlux",
    "spring-boot-starter-data-jpa": "Spring Data JPA",
    "spring-boot-starter-security": "Spring Security",
    "spring-boot-starter-test": "Spring Boot",
    "spring-core": "Spring Framework",
    "spring-webmvc": "Spring MVC",
    "hibernate-core": "Hibernate",
    "mybatis": "MyBatis",
    "junit": "JUnit",
    "junit-jupiter": "JUnit",
    "junit-jupiter-api": "JUnit",
    "testng": "TestNG",
    "mockito-core": "Mockito",
    "lombok": "Lombok",
    "jackson-databind": "Jackson",
    "gson": "Gson",
    "guava": "Guava",
    "commons-lang3": "Apache Commons",
    "slf4j-api": "SLF4J",
    "logback-classic": "Logback",
    "log4j-core": "Log4j",
    "postgresql": "PostgreSQL",
    "mysql-connector-java": "MySQL",
    "mysql-connector-j": "MySQL",
    "h2": "H2",
    "kafka-clients": "Apache Kafka",
    "spring-kafka": "Apache Kafka",
    "quarkus-core": "Quarkus",
    "micronaut-runtime": "Micronaut",
    "vertx-core": "Vert.x",
    "netty-all": "Netty",
    "okhttp": "OkHttp",
    "retrofit": "Retrofit",
    "kotlin-stdlib": "Kotlin",
})

DOTNET_TECH = MappingProxyType({
    "Newtonsoft.Json": "Json.NET",
    "EntityFramework": "Entity Framework",
    "Microsoft.EntityFrameworkCore": "Entity Framework Core",
    "Microsoft.AspNet.Mvc": "ASP.NET MVC",
    "Microsoft.AspNet.WebApi": "ASP.NET Web API",
    "Microsoft.AspNet.WebApi.Core": "ASP.NET Web API",
    "Microsoft.AspNet.SignalR": "SignalR",
    "Dapper": "Dapper",
    "AutoMapper": "AutoMapper",
    "Serilog": "Serilog",
    "NLog": "NLog",
    "log4net": "log4net",
    "NUnit": "NUnit",
    "xunit": "xUnit",
    "MSTest.TestFramework": "MSTest",
    "Moq": "Moq",
    "jQuery": "jQuery",
    "bootstrap": "Bootstrap",
    "Modernizr": "Modernizr",
    "Unity": "Unity Container",
    "Autofac": "Autofac",
    "Ninject": "Ninject",
    "StackExchange.Redis": "Redis",
    "Npgsql": "PostgreSQL",
    "MySql.Data": "MySQL",
    "RestSharp": "RestSharp",
    "Owin": "OWIN",
})

RUBY_TECH = MappingProxyType({
    "rails": "Ruby on Rails",
    "sinatra": "Sinatra",
    "hanami": "Hanami",
    "grape": "Grape",
    "puma": "Puma",
    "unicorn": "Unicorn",
    "sidekiq": "Sidekiq",
    "resque": "Resque",
    "pg": "PostgreSQL",
    "mysql2": "MySQL",
    "sqlite3": "SQLite",
    "redis": "Redis",
    "mongoid": "MongoDB",
    "devise": "Devise",
    "pundit": "Pundit",
    "rspec": "RSpec",
    "rspec-rails": "RSpec",
    "minitest": "Minitest",
    "capybara": "Capybara",
    "rubocop": "RuboCop",
    "turbo-rails": "Hotwire",
    "stimulus-rails": "Hotwire",
    "jbuilder": "Jbuilder",
    "graphql": "GraphQL",
    "nokogiri": "Nokogiri",
    "jekyll": "Jekyll",
})

PHP_TECH = MappingProxyType({
    "laravel/framework": "Laravel",
    "symfony/symfony": "Symfony",
    "symfony/framework-bundle": "Symfony",
    "slim/slim": "Slim",
    "cakephp/cakephp": "CakePHP",
    "codeigniter4/framework": "CodeIgniter",
    "yiisoft/yii2": "Yii",
    "laminas/laminas-mvc": "Laminas",
    "doctrine/orm": "Doctrine",
    "guzzlehttp/guzzle": "Guzzle",
    "monolog/monolog": "Monolog",
    "twig/twig": "Twig",
    "livewire/livewire": "Livewire",
    "inertiajs/inertia-laravel": "Inertia.js",
    "phpunit/phpunit": "PHPUnit",
    "pestphp/pest": "Pest",
    "predis/predis": "Redis",
    "league/flysystem": "Flysystem",
    "wordpress/core": "WordPress",
    "drupal/core": "Drupal",
})

GO_TECH = MappingProxyType({
    "github.com/gin-gonic/gin": "Gin",
    "github.com/labstack/echo/v4": "Echo",
    "github.com/gofiber/fiber/v2": "Fiber",
    "github.com/go-chi/chi/v5": "chi",
    "github.com/gorilla/mux": "Gorilla Mux",
    "github.com/gorilla/websocket": "Gorilla WebSocket",
    "gorm.io/gorm": "GORM",
    "github.com/jmoiron/sqlx": "sqlx",
    "github.com/lib/pq": "PostgreSQL",
    "github.com/jackc/pgx/v5": "PostgreSQL",
    "github.com/go-sql-driver/mysql": "MySQL",
    "github.com/mattn/go-sqlite3": "SQLite",
    "go.mongodb.org/mongo-driver": "MongoDB",
    "github.com/redis/go-redis/v9": "Redis",
    "github.com/go-redis/redis/v8": "Redis",
    "google.golang.org/grpc": "gRPC",
    "google.golang.org/protobuf": "Protocol Buffers",
    "github.com/spf13/cobra": "Cobra",
    "github.com/spf13/viper": "Viper",
    "go.uber.org/zap": "Zap",
    "github.com/sirupsen/logrus": "Logrus",
    "github.com/stretchr/testify": "Testify",
    "github.com/prometheus/client_golang": "Prometheus",
    "k8s.io/client-go": "Kubernetes",
    "github.com/aws/aws-sdk-go": "AWS SDK",
    "github.com/aws/aws-sdk-go-v2": "AWS SDK",
})

RUST_TECH = MappingProxyType({
    "tokio": "Tokio",
    "async-std": "async-std",
    "actix-web": "Actix Web",
    "axum": "Axum",
    "rocket": "Rocket",
    "warp": "warp",
    "hyper": "Hyper",
    "reqwest": "reqwest",
    "serde": "Serde",
    "serde_json": "Serde",
    "diesel": "Diesel",
    "sqlx": "SQLx",
    "sea-orm": "SeaORM",
    "redis": "Redis",
    "tonic": "gRPC",
    "clap": "clap",
    "tracing": "tracing",
    "log": "log",
    "anyhow": "anyhow",
    "thiserror": "thiserror",
    "rayon": "Rayon",
    "wasm-bindgen": "WebAssembly",
    "yew": "Yew",
    "leptos": "Leptos",
    "tauri": "Tauri",
    "bevy": "Bevy",
})

DART_TECH = MappingProxyType({
    "flutter": "Flutter",
    "flutter_test": "Flutter",
    "provider": "Provider",
    "flutter_bloc": "BLoC",
    "bloc": "BLoC",
    "riverpod": "Riverpod",
    "flutter_riverpod": "Riverpod",
    "get": "GetX",
    "http": "http",
    "dio": "Dio",
    "firebase_core": "Firebase",
    "cloud_firestore": "Cloud Firestore",
    "firebase_auth": "Firebase Auth",
    "sqflite": "SQLite",
    "hive": "Hive",
    "shared_preferences": "Shared Preferences",
    "go_router": "go_router",
    "freezed": "Freezed",
    "json_serializable": "json_serializable",
    "shelf": "Shelf",
    "test": "Dart test",
})

ELIXIR_TECH = MappingProxyType({
    "phoenix": "Phoenix",
    "phoenix_live_view": "Phoenix LiveView",
    "phoenix_html": "Phoenix",
    "plug_cowboy": "Plug",
    "plug": "Plug",
    "ecto": "Ecto",
    "ecto_sql": "Ecto",
    "postgrex": "PostgreSQL",
    "myxql": "MySQL",
    "absinthe": "Absinthe",
    "jason": "Jason",
    "oban": "Oban",
    "broadway": "Broadway",
    "tesla": "Tesla",
    "finch": "Finch",
    "ex_unit": "ExUnit",
    "credo": "Credo",
    "nerves": "Nerves",
})

DOCKER_TECH = MappingProxyType({
    "node": "Node.js",
    "python": "Python",
    "golang": "Go",
    "rust": "Rust",
    "ruby": "Ruby",
    "php": "PHP",
    "openjdk": "Java",
    "eclipse-temurin": "Java",
    "amazoncorretto": "Java",
    "maven": "Maven",
    "gradle": "Gradle",
    "mcr.microsoft.com/dotnet/aspnet": ".NET",
    "mcr.microsoft.com/dotnet/sdk": ".NET",
    "mcr.microsoft.com/dotnet/runtime": ".NET",
    "elixir": "Elixir",
    "dart": "Dart",
    "nginx": "Nginx",
    "httpd": "Apache HTTP Server",
    "postgres": "PostgreSQL",
    "mysql": "MySQL",
    "mariadb": "MariaDB",
    "mongo": "MongoDB",
    "redis": "Redis",
    "alpine": "Alpine Linux",
    "ubuntu": "Ubuntu",
    "debian": "Debian",
    "nvidia/cuda": "CUDA",
    "oven/bun": "Bun",
    "denoland/deno": "Deno",
})
