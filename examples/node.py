from fluentdocker import Dockerfile

image = Dockerfile() \
    .from_("node:18-alpine") \
    .run("apk update") \
    .expose(8080) \
    .cmd("npx --yes serve -s -l 8080")

print(image.render())

image.build(".", "node-app-example")
