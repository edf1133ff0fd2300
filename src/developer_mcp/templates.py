"""Template bodies for generated components and project skeletons."""

import json


# --- Components ---

def react_component(component_name: str) -> str:
    return f"""import React from "react";

const {component_name} = () => {{
  return <div>{component_name} works!</div>;
}};

export default {component_name};
"""


def svelte_component(component_name: str) -> str:
    return f"""<script>
  // Svelte component logic here
</script>

<style>
  /* Styles for {component_name} */
</style>

<div>{component_name} works!</div>
"""


def angular_component_ts(name: str, component_name: str) -> str:
    return f"""import {{ Component }} from '@angular/core';

@Component({{
  selector: 'app-{name}',
  templateUrl: './{name}.component.html',
  styleUrls: ['./{name}.component.css']
}})
export class {component_name}Component {{
}}
"""


def angular_component_html(component_name: str) -> str:
    return f"<p>{component_name} works!</p>"


def angular_component_css(component_name: str) -> str:
    return f"/* Styles for {component_name} */"


# --- Projects ---

def vite_react_package_json(name: str) -> str:
    return json.dumps({
        "name": name,
        "version": "1.0.0",
        "scripts": {
            "start": "vite",
            "build": "vite build",
            "dev": "vite",
        },
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
        },
        "devDependencies": {
            "vite": "^4.0.0",
            "typescript": "^5.0.0",
        },
    }, indent=2, ensure_ascii=False)


def vite_react_index_html(name: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
  <head><title>{name}</title></head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>"""


def vite_react_main_tsx(name: str) -> str:
    return f"""import React from "react";
import ReactDOM from "react-dom/client";

const App = () => <h1>{name} (React with Vite)</h1>;

ReactDOM.createRoot(document.getElementById("root")!).render(<App />);
"""


def svelte_package_json(name: str) -> str:
    return json.dumps({
        "name": name,
        "version": "1.0.0",
        "scripts": {
            "dev": "vite",
            "build": "vite build",
        },
        "dependencies": {
            "svelte": "^4.0.0",
        },
        "devDependencies": {
            "vite": "^4.0.0",
        },
    }, indent=2, ensure_ascii=False)


def svelte_index_html(name: str) -> str:
    return f"""<!DOCTYPE html>
<html>
  <head><title>{name}</title></head>
  <body>
    <script type="module" src="/src/main.js"></script>
  </body>
</html>"""


def svelte_app(name: str) -> str:
    return f"""<script>
  let message = "{name} (Svelte)";
</script>

<main>
  <h1>{{message}}</h1>
</main>"""


SVELTE_MAIN_JS = """import App from './App.svelte';

const app = new App({
  target: document.body,
});

export default app;"""


def springboot_pom(name: str) -> str:
    return f"""<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.example</groupId>
  <artifactId>{name}</artifactId>
  <version>0.0.1-SNAPSHOT</version>
  <dependencies>
    <dependency>
      <groupId>org.springframework.boot</groupId>
      <artifactId>spring-boot-starter</artifactId>
    </dependency>
  </dependencies>
</project>"""


def springboot_application(name: str) -> str:
    return f"""package com.example.{name.lower()};

import org.springframework.boot.SpringApplication;
import org.springframework.boot.autoconfigure.SpringBootApplication;

@SpringBootApplication
public class {name}Application {{
    public static void main(String[] args) {{
        SpringApplication.run({name}Application.class, args);
    }}
}}"""
